"""Diagram grammar table.

Maps every diagram category to the Mermaid dialect the model must emit, its
required top-level keyword and the structural rules for that dialect.

Dependencies: backend.models.study, backend.core.exceptions
System role: Single source of the category -> dialect contract
"""

from dataclasses import dataclass
from types import MappingProxyType

from backend.core.exceptions import InvalidInputError
from backend.models.study import DiagramCategory


@dataclass(frozen=True)
class DiagramGrammar:
    """Markup dialect and structural constraints for one category."""

    category: DiagramCategory
    label: str
    dialect: str
    keyword: str
    focus: str
    rules: tuple[str, ...]

    def describe_rules(self) -> str:
        """Render the rules as a bulleted list for prompt embedding."""
        return "\n".join(f"- {rule}" for rule in self.rules)


DIAGRAM_GRAMMARS = MappingProxyType({
    DiagramCategory.HIERARCHY_MAP: DiagramGrammar(
        category=DiagramCategory.HIERARCHY_MAP,
        label="Mind Map",
        dialect="Mermaid mind map",
        keyword="mindmap",
        focus="hierarchy and connections between concepts",
        rules=(
            "Start the markup with the line 'mindmap'.",
            "Declare exactly one root node using the form root((Central Topic)).",
            "Express child concepts through indentation only; never draw arrows.",
            "Keep node labels short and free of parentheses, brackets and quotes.",
        ),
    ),
    DiagramCategory.FLOWCHART: DiagramGrammar(
        category=DiagramCategory.FLOWCHART,
        label="Flowchart",
        dialect="Mermaid flowchart",
        keyword="flowchart",
        focus="processes and logical flow",
        rules=(
            "Start the markup with 'flowchart TD' or 'flowchart LR'.",
            'Give every node a short alphanumeric id and a quoted label, e.g. A["Label"].',
            "Connect nodes with --> and put edge labels inside pipes: A -->|label| B.",
            'Use a rhombus node such as B{"Question?"} for each decision point.',
        ),
    ),
    DiagramCategory.SEQUENCE: DiagramGrammar(
        category=DiagramCategory.SEQUENCE,
        label="Sequence",
        dialect="Mermaid sequence diagram",
        keyword="sequenceDiagram",
        focus="interactions between participants over time",
        rules=(
            "Start the markup with the line 'sequenceDiagram'.",
            "Declare every participant up front with 'participant Alias as Name'.",
            "Use ->> for requests and -->> for replies; every message needs text after the colon.",
            "Use 'Note over A,B: text' for commentary instead of free text lines.",
        ),
    ),
    DiagramCategory.TIMELINE: DiagramGrammar(
        category=DiagramCategory.TIMELINE,
        label="Timeline",
        dialect="Mermaid timeline",
        keyword="timeline",
        focus="chronological events",
        rules=(
            "Start the markup with the line 'timeline' followed by one 'title' line.",
            "Write each period as 'period : event'; add more events with further ' : event' parts.",
            "Order periods from earliest to latest.",
            "Do not use colons inside event text.",
        ),
    ),
    DiagramCategory.ORG_HIERARCHY: DiagramGrammar(
        category=DiagramCategory.ORG_HIERARCHY,
        label="Org Chart",
        dialect="Mermaid top-down graph",
        keyword="graph TD",
        focus="roles, reporting lines and hierarchical structure",
        rules=(
            "Start the markup with 'graph TD' so tiers read from top to bottom.",
            "Declare nodes tier by tier, from the most senior role down to individual contributors.",
            "Draw every reporting line from manager to report with -->.",
            "Define one classDef per tier and apply it with ::: so each level looks distinct.",
        ),
    ),
    DiagramCategory.SCHEDULE: DiagramGrammar(
        category=DiagramCategory.SCHEDULE,
        label="Gantt Chart",
        dialect="Mermaid Gantt chart",
        keyword="gantt",
        focus="tasks, durations and dependencies",
        rules=(
            "Start the markup with 'gantt' followed by exactly one 'title' line.",
            "Include the line 'dateFormat YYYY-MM-DD' and write every calendar date as YYYY-MM-DD.",
            "Group tasks under 'section' lines; write each task as 'Task name :id, 2024-01-01, 3d'.",
            "Express dependencies with 'after id' and do not use colons inside task names.",
        ),
    ),
})


def get_grammar(category: DiagramCategory | str) -> DiagramGrammar:
    """Look up the grammar for a category or its string value.

    Raises:
        InvalidInputError: If the category is unknown
    """
    try:
        return DIAGRAM_GRAMMARS[DiagramCategory(category)]
    except (KeyError, ValueError):
        raise InvalidInputError(
            f"Unknown diagram category: {category}", field="category"
        ) from None
