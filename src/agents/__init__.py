from src.agents.base_agent import BaseAgent
from src.agents.supply_chain_analyst import SupplyChainAnalystAgent

__all__ = [
    "BaseAgent",
    "SupplyChainAnalystAgent",
]
