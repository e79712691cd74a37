from agent_workspace.skills.base import Skill, SkillInput
from agent_workspace.skills.calculator import CalculatorInput, CalculatorSkill

__all__ = ["Skill", "SkillInput", "CalculatorSkill", "CalculatorInput"]
