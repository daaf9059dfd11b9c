import pytest
from agents.base import BaseAgent

def test_base_agent_is_abstract():
    """Cannot instantiate BaseAgent directly."""
    with pytest.raises(TypeError):
        BaseAgent("test")

def test_custom_agent_requires_execute():
    """Custom agent must implement execute()."""
    class BadAgent(BaseAgent):
        pass

    with pytest.raises(TypeError):
        BadAgent("bad")

@pytest.mark.asyncio
async def test_agent_callable():
    """Agent should be callable via __call__ and pass arguments through."""
    class EchoAgent(BaseAgent):
        async def execute(self, symbol, max_articles=10):
            return (symbol, max_articles)

    agent = EchoAgent("echo")
    assert agent.name == "echo"
    assert await agent("AAPL", max_articles=3) == ("AAPL", 3)

@pytest.mark.asyncio
async def test_agent_error_propagates():
    """Failures are logged and re-raised."""
    class ErrorAgent(BaseAgent):
        async def execute(self):
            raise ValueError("Test error")

    agent = ErrorAgent("error_test")
    with pytest.raises(ValueError, match="Test error"):
        await agent()

@pytest.mark.asyncio
async def test_agent_log_event():
    """Agent should have _log_event helper."""
    class TestAgent(BaseAgent):
        async def execute(self):
            self._log_event("test_event", key="value")
            return "ok"

    agent = TestAgent("test")
    assert await agent() == "ok"
