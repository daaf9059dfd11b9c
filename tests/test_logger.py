import io
import json
import pytest
import structlog
from agents.base import BaseAgent
from utils.logger import setup_logging, get_logger

@pytest.fixture
def log_stream():
    stream = io.StringIO()
    setup_logging(log_level="INFO", log_format="json", stream=stream)
    yield stream
    structlog.reset_defaults()

def read_events(stream):
    return [json.loads(line) for line in stream.getvalue().splitlines() if line]

def test_json_events_carry_logger_name(log_stream):
    get_logger("unit").info("something_happened", symbol="AAPL")

    events = read_events(log_stream)
    assert events[-1]["event"] == "something_happened"
    assert events[-1]["logger_name"] == "unit"
    assert events[-1]["symbol"] == "AAPL"
    assert events[-1]["level"] == "info"
    assert "timestamp" in events[-1]

def test_logger_created_before_setup_uses_configuration():
    """Module-level loggers are built at import time, before setup_logging()."""
    early = get_logger("early")
    stream = io.StringIO()
    try:
        setup_logging(log_level="INFO", log_format="json", stream=stream)
        early.info("late_event", symbol="TSLA")
    finally:
        structlog.reset_defaults()

    events = read_events(stream)
    assert events[-1]["event"] == "late_event"
    assert events[-1]["logger_name"] == "early"

def test_modules_with_import_time_loggers_load():
    import main
    from services import fallback, factory
    from storage import watchlist

    for module in (main, fallback, factory, watchlist):
        assert module.logger is not None

def test_level_filtering(log_stream):
    logger = get_logger("unit")
    logger.debug("hidden_event")
    logger.warning("shown_event")

    names = [e["event"] for e in read_events(log_stream)]
    assert "hidden_event" not in names
    assert "shown_event" in names

@pytest.mark.asyncio
async def test_agent_context_reaches_other_loggers(log_stream):
    other = get_logger("provider.stub")

    class NoisyAgent(BaseAgent):
        async def execute(self):
            other.info("provider_called")
            return "ok"

    assert await NoisyAgent("noisy")() == "ok"
    after = get_logger("unit")
    after.info("outside_agent")

    events = {e["event"]: e for e in read_events(log_stream)}
    assert events["provider_called"]["agent"] == "noisy"
    assert "duration_ms" in events["agent_execution_completed"]
    assert "agent" not in events["outside_agent"]
