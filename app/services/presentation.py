"""
View transforms for roadmap milestones. Pure functions: input order is
kept as-is and nothing is validated or re-sorted.
"""
import re
from typing import Any, Dict, List, Optional, Sequence

LAYOUTS = ("flowchart", "accordion", "chart", "mermaid")


def flowchart_cards(milestones: Optional[Sequence]) -> List[Dict[str, Any]]:
    return [
        {"step": index + 1, "label": m.period_label, "title": m.title, "tasks": list(m.tasks)}
        for index, m in enumerate(milestones or [])
    ]


def accordion_items(milestones: Optional[Sequence]) -> List[Dict[str, Any]]:
    return [
        {
            "id": f"item-{index}",
            "trigger": f"{m.period_label}: {m.title}",
            "content": list(m.tasks),
        }
        for index, m in enumerate(milestones or [])
    ]


def bar_chart_data(milestones: Optional[Sequence]) -> List[Dict[str, Any]]:
    # Bars share one height; the tooltip carries the detail
    return [
        {
            "name": m.short_label,
            "value": 1,
            "title": m.title,
            "tasks": list(m.tasks),
            "tooltip": f"{m.period_label}: {m.title}",
        }
        for m in milestones or []
    ]


def _mermaid_text(text: str) -> str:
    return re.sub(r'["\[\]{}()<>|]', "", text).strip()


def mermaid_flowchart(milestones: Optional[Sequence]) -> str:
    """Renders milestones as a top-down Mermaid chain."""
    milestones = list(milestones or [])
    if not milestones:
        return ""
    lines = ["graph TD"]
    for index, m in enumerate(milestones):
        lines.append(f'    M{index}["{_mermaid_text(m.period_label)}: {_mermaid_text(m.title)}"]')
    for index in range(len(milestones) - 1):
        lines.append(f"    M{index} --> M{index + 1}")
    return "\n".join(lines)


def render_milestones(milestones: Optional[Sequence], layout: str):
    if layout == "flowchart":
        return flowchart_cards(milestones)
    if layout == "accordion":
        return accordion_items(milestones)
    if layout == "chart":
        return bar_chart_data(milestones)
    if layout == "mermaid":
        return mermaid_flowchart(milestones)
    raise ValueError(f"Unknown layout '{layout}'. Expected one of {', '.join(LAYOUTS)}.")
