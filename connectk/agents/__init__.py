"""Agent implementations for Connect-K."""

from connectk.agents.base import Agent
from connectk.agents.human import HumanAgent
from connectk.agents.random_agent import RandomAgent
from connectk.agents.search_agent import SearchAgent

__all__ = ["Agent", "HumanAgent", "RandomAgent", "SearchAgent"]
