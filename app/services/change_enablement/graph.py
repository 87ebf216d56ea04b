"""
Change Assessment Graph.

Builds the LangGraph StateGraph that sequences classification, risk scoring
and approval path resolution.
"""

from langgraph.graph import StateGraph, START, END

from app.services.change_enablement.state import ChangeAssessmentState
from app.services.change_enablement.nodes import (
    NODE_ASSESS_RISK,
    NODE_CLASSIFY,
    NODE_RESOLVE_PATH,
    assess_risk_node,
    classify_change_node,
    resolve_approval_path_node,
    route_after_classification,
)


# 1. Initialize Graph
workflow = StateGraph(ChangeAssessmentState)

# 2. Add Nodes
workflow.add_node(NODE_CLASSIFY, classify_change_node)
workflow.add_node(NODE_ASSESS_RISK, assess_risk_node)
workflow.add_node(NODE_RESOLVE_PATH, resolve_approval_path_node)

# 3. Add Edges
workflow.add_edge(START, NODE_CLASSIFY)
workflow.add_conditional_edges(
    NODE_CLASSIFY,
    route_after_classification,
    {NODE_ASSESS_RISK: NODE_ASSESS_RISK, NODE_RESOLVE_PATH: NODE_RESOLVE_PATH},
)
workflow.add_edge(NODE_ASSESS_RISK, NODE_RESOLVE_PATH)
workflow.add_edge(NODE_RESOLVE_PATH, END)

# 4. Compile
change_assessment_graph = workflow.compile()
