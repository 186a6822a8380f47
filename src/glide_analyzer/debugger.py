"""
Calculation Debugger
====================

Records each step of a glide calculation (inputs, formula, result)
so a computation can be inspected line by line.

Nothing is recorded unless a debugger has been installed with
set_debugger(); the physics core reports through debug_step().
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional


@dataclass
class CalculationStep:
    """A single calculation step with inputs, formula, and result."""
    category: str           # e.g., "Atmosphere", "Forces", "Glide"
    description: str        # Human-readable description
    formula: str            # Formula as text, may be empty
    variables: dict         # Input variables with values
    result: Any
    result_name: str
    result_unit: str = ""
    comment: str = ""


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:.6g}"
    return str(value)


class CalculationDebugger:
    """
    Traces and records calculation steps.

    Usage:
        debugger = CalculationDebugger()
        debugger.start(planet="Mars")
        debugger.start_section("Atmosphere")
        debugger.add_step(
            category="Atmosphere",
            description="Scale ISA density by air thickness",
            formula="rho = rho_isa * thickness",
            variables={"rho_isa": 1.225, "thickness": 0.006},
            result=0.00735,
            result_name="rho",
            result_unit="kg/m^3",
        )
        print(debugger.get_report())
    """

    def __init__(self):
        """Initialize the debugger."""
        self.steps: List[CalculationStep] = []
        self.sections: List[tuple] = []  # (index, section_name)
        self.start_time: Optional[datetime] = None
        self.end_time: Optional[datetime] = None
        self.metadata: Dict[str, Any] = {}

    def clear(self):
        """Clear all recorded steps."""
        self.steps = []
        self.sections = []
        self.start_time = None
        self.end_time = None
        self.metadata = {}

    def start(self, **metadata):
        """Start a new debugging session."""
        self.clear()
        self.start_time = datetime.now()
        self.metadata = metadata

    def finish(self):
        """Finish the debugging session."""
        self.end_time = datetime.now()

    def start_section(self, name: str):
        """Start a new section of calculations."""
        self.sections.append((len(self.steps), name))

    def add_step(
        self,
        category: str,
        description: str,
        formula: str,
        variables: dict,
        result: Any,
        result_name: str,
        result_unit: str = "",
        comment: str = ""
    ):
        """Add a calculation step."""
        self.steps.append(CalculationStep(
            category=category,
            description=description,
            formula=formula,
            variables=variables,
            result=result,
            result_name=result_name,
            result_unit=result_unit,
            comment=comment,
        ))

    def add_input(self, name: str, value: Any, unit: str = "", description: str = ""):
        """Record an input parameter."""
        self.add_step(
            category="Input",
            description=description or f"Input parameter: {name}",
            formula="",
            variables={},
            result=value,
            result_name=name,
            result_unit=unit,
        )

    def get_report(self, include_sections: bool = True) -> str:
        """
        Generate a formatted text report of all recorded steps.

        Parameters:
        ----------
        include_sections : bool
            Include section headers in the report

        Returns:
        -------
        str
            Formatted calculation trace
        """
        lines = ["=" * 70, "GLIDE CALCULATION TRACE", "=" * 70]

        if self.start_time:
            lines.append(f"Generated: {self.start_time.strftime('%Y-%m-%d %H:%M:%S')}")

        if self.metadata:
            lines.append("")
            lines.append("Configuration:")
            for key, value in self.metadata.items():
                lines.append(f"  {key}: {_format_value(value)}")

        lines.append("")

        section_indices = {idx: name for idx, name in self.sections}

        for number, step in enumerate(self.steps, start=1):
            if include_sections and (number - 1) in section_indices:
                lines.append("-" * 70)
                lines.append(f">>> {section_indices[number - 1]}")
                lines.append("-" * 70)

            lines.append(f"[{number}] {step.description}")

            if step.variables:
                inputs = ", ".join(
                    f"{name}={_format_value(value)}"
                    for name, value in step.variables.items()
                )
                lines.append(f"    Inputs: {inputs}")

            if step.formula:
                lines.append(f"    Formula: {step.formula}")

            result = f"    => {step.result_name} = {_format_value(step.result)}"
            if step.result_unit:
                result += f" {step.result_unit}"
            lines.append(result)

            if step.comment:
                lines.append(f"    // {step.comment}")

            lines.append("")

        lines.append("=" * 70)
        lines.append(f"Total Steps: {len(self.steps)}")
        if self.start_time and self.end_time:
            elapsed = (self.end_time - self.start_time).total_seconds()
            lines.append(f"Elapsed Time: {elapsed:.3f} seconds")
        lines.append("=" * 70)

        return "\n".join(lines)

    def get_step_count(self) -> int:
        """Return the number of recorded steps."""
        return len(self.steps)

    def find_steps_by_category(self, category: str) -> List[CalculationStep]:
        """Find all steps in a given category."""
        return [s for s in self.steps if s.category == category]

    def find_step_by_result(self, result_name: str) -> Optional[CalculationStep]:
        """Find the most recent step that produced a specific result."""
        for step in reversed(self.steps):
            if step.result_name == result_name:
                return step
        return None


# Global debugger instance, None when tracing is off
_debugger: Optional[CalculationDebugger] = None


def get_debugger() -> Optional[CalculationDebugger]:
    """Get the installed debugger, if any."""
    return _debugger


def set_debugger(debugger: Optional[CalculationDebugger]):
    """Install (or with None, remove) the global debugger."""
    global _debugger
    _debugger = debugger


def debug_section(name: str):
    """Start a section on the global debugger (if active)."""
    if _debugger is not None:
        _debugger.start_section(name)


def debug_step(
    category: str,
    description: str,
    formula: str,
    variables: dict,
    result: Any,
    result_name: str,
    result_unit: str = "",
    comment: str = ""
):
    """Add a step to the global debugger (if active)."""
    if _debugger is not None:
        _debugger.add_step(
            category=category,
            description=description,
            formula=formula,
            variables=variables,
            result=result,
            result_name=result_name,
            result_unit=result_unit,
            comment=comment,
        )
