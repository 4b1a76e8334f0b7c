import os

from diorama.logger import get_logger

log = get_logger("settings")

_TRUTHY = {"1", "true", "yes", "on"}


class Settings:
    """Process-wide runtime switches read from the environment.

    ``strict``: raise on precondition violations (negative ``dt``) instead of
    clamping them. Meant for development runs and tests, never for the live
    scene.

    ``default_max_particles``: population ceiling applied to every system whose
    config leaves ``max_particles`` unset. ``None`` means unbounded.
    """

    def __init__(self, environ=None):
        self._strict = False
        self._default_max_particles: int | None = None
        self.load(os.environ if environ is None else environ)

    @property
    def strict(self) -> bool:
        return self._strict

    @strict.setter
    def strict(self, value) -> None:
        self._strict = bool(value)

    @property
    def default_max_particles(self) -> int | None:
        return self._default_max_particles

    @default_max_particles.setter
    def default_max_particles(self, value) -> None:
        if value is None:
            self._default_max_particles = None
            return
        self._default_max_particles = max(0, int(value))

    def load(self, environ) -> None:
        """Read ``DIORAMA_STRICT`` and ``DIORAMA_MAX_PARTICLES``."""
        self._strict = environ.get("DIORAMA_STRICT", "").strip().lower() in _TRUTHY
        raw = environ.get("DIORAMA_MAX_PARTICLES", "").strip()
        if not raw:
            self._default_max_particles = None
            return
        try:
            self.default_max_particles = int(raw)
        except ValueError:
            log.warn("Ignoring non-integer DIORAMA_MAX_PARTICLES", repr(raw))
            self._default_max_particles = None


settings = Settings()
