import io

from diorama.logger import Logger, get_logger


def test_logger_info_output():
    buf = io.StringIO()
    logger = get_logger("test")
    logger.stream = buf  # type: ignore
    logger.min_level = 10
    logger.info("Hello", "World")
    out = buf.getvalue()
    assert "INFO" in out and "test: Hello World" in out


def test_logger_respects_min_level():
    buf = io.StringIO()
    logger = Logger("quiet", stream=buf, min_level=30)
    logger.debug("hidden")
    logger.info("hidden")
    logger.warn("shown")
    assert "hidden" not in buf.getvalue()
    assert "WARN" in buf.getvalue()


def test_logger_without_stream_is_silent():
    Logger("void", stream=None).error("nothing happens")


def test_logger_survives_closed_stream():
    buf = io.StringIO()
    buf.close()
    Logger("closed", stream=buf, min_level=10).error("still fine")


def test_particle_system_warns_on_negative_dt():
    from diorama.config import EmitterConfig
    from diorama import particle_system
    from diorama.particle_system import ParticleSystem
    from diorama.rng_service import RNGService
    from diorama.services import PointHandle

    buf = io.StringIO()
    original = particle_system.log
    particle_system.log = Logger("particles", stream=buf, min_level=10)
    try:
        ps = ParticleSystem(EmitterConfig(name="warned"), PointHandle(), PointHandle.at((0, 0, 5)), rng=RNGService(0))
        ps.update(-1.0)
    finally:
        particle_system.log = original
    out = buf.getvalue()
    assert "warned: rate=200/s" in out
    assert "invalid time step" in out and "WARN" in out
