"""Mobile element library entries."""

from dataclasses import dataclass, field


@dataclass
class ERVAnnotations:
    """Which long terminal repeats of an endogenous retrovirus are present."""

    ltr5: bool = False
    ltr3: bool = False


@dataclass
class MELibrary:
    """Entry of an endogenous retrovirus library."""

    sequence: str = ""
    size: int = 0
    annotations_erv: ERVAnnotations = field(default_factory=ERVAnnotations)