from __future__ import annotations

from pydantic import Field

from agent_workspace.skills.base import Skill, SkillInput


class CalculatorInput(SkillInput):
    operation: str = Field(..., description="add | subtract | multiply | divide")
    a: float = Field(..., description="First number")
    b: float = Field(..., description="Second number")


class CalculatorSkill(Skill):
    name = "Calculator"
    description = "Perform mathematical calculations"
    input_model = CalculatorInput

    async def _run(self, args: CalculatorInput) -> float:
        a, b = args.a, args.b
        if args.operation == "add":
            return a + b
        if args.operation == "subtract":
            return a - b
        if args.operation == "multiply":
            return a * b
        if args.operation == "divide":
            if b == 0:
                raise ZeroDivisionError("Cannot divide by zero")
            return a / b
        raise ValueError(f"Unknown operation: {args.operation}")
