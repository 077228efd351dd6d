from dataclasses import dataclass, field

from newsboard.modules.headlines.schemas import DisplayArticle


@dataclass(frozen=True)
class Idle:
    tag = "idle"


@dataclass(frozen=True)
class Loading:
    tag = "loading"


@dataclass(frozen=True)
class Success:
    articles: tuple[DisplayArticle, ...] = field(default_factory=tuple)
    tag = "success"


@dataclass(frozen=True)
class Failed:
    message: str
    kind: str
    tag = "failed"


CycleState = Idle | Loading | Success | Failed
