"""Pendant-side value types: versions, UI enums and chart data."""

from dataclasses import asdict, dataclass, field
from enum import Enum


@dataclass(frozen=True, order=True)
class Version:
    """Semantic version (major, minor, patch)."""

    major: int
    minor: int = 0
    patch: int = 0

    @classmethod
    def parse(cls, text: str) -> "Version":
        parts = [int(p) for p in text.strip().split(".")]
        if not 1 <= len(parts) <= 3:
            raise ValueError(f"Invalid version: {text!r}")
        return cls(*parts)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


class Disposition(str, Enum):
    """Tone of a pendant notice."""

    NEUTRAL = "Neutral"
    POSITIVE = "Positive"
    NEGATIVE = "Negative"


class LoggingLevel(str, Enum):
    """Severity of a line sent to the pendant log."""

    DEBUG = "Debug"
    INFO = "Info"
    DEFAULT = "Default"
    WARNING = "Warn"
    CRITICAL = "Critical"


class IntegrationPoint(str, Enum):
    """Places in the pendant UI where an extension may add a button or panel."""

    UTILITY_WINDOW = "UtilityWindow"
    NAVIGATION_PANEL = "NavigationPanel"
    SMART_FRAME_JOG_PANEL_TOP_LEFT = "SmartFrameJogPanelTopLeft"
    SMART_FRAME_JOG_PANEL_TOP_RIGHT = "SmartFrameJogPanelTopRight"
    SMART_FRAME_JOG_PANEL_BOTTOM_LEFT = "SmartFrameJogPanelBottomLeft"
    SMART_FRAME_JOG_PANEL_BOTTOM_CENTER = "SmartFrameJogPanelBottomCenter"
    SMART_FRAME_JOG_PANEL_BOTTOM_RIGHT = "SmartFrameJogPanelBottomRight"
    SMART_FRAME_JOG_PANEL_BOTTOM_ANY = "SmartFrameJogPanelBottomAny"
    JOG_PANEL_TOP_CENTER = "JogPanelTopCenter"


@dataclass(frozen=True)
class DataPoint:
    """A single (x, y) chart sample."""

    x: float
    y: float


@dataclass
class Series:
    """A line series for a pendant chart."""

    x: list[float]
    y: list[float]
    color: str | None = None
    vertex: str | None = None
    max_pts: int | None = None
    extra: dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        if len(self.x) != len(self.y):
            raise ValueError("Series x and y must have the same length")

    def to_dict(self) -> dict:
        data = asdict(self)
        extra = data.pop("extra")
        data = {k: v for k, v in data.items() if v is not None}
        data.update(extra)
        return data
