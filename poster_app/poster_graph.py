from typing import Any, TypedDict

from langgraph.graph import StateGraph, START, END

from .generator import build_prompt, call_image_api, extract_image_url


class PosterState(TypedDict, total=False):
    client: Any
    title: str
    style: str
    model: str
    prompt: str
    response: Any
    image_url: str


def build_prompt_node(state: PosterState) -> PosterState:
    state["prompt"] = build_prompt(state["title"], state["style"])
    return state


async def generate_node(state: PosterState) -> PosterState:
    state["response"] = await call_image_api(
        state["client"],
        state["model"],
        state["prompt"],
    )
    return state


def extract_url_node(state: PosterState) -> PosterState:
    state["image_url"] = extract_image_url(state["response"])
    return state


def build_poster_graph():
    workflow = StateGraph(PosterState)
    workflow.add_node("build_prompt", build_prompt_node)
    workflow.add_node("generate", generate_node)
    workflow.add_node("extract_url", extract_url_node)

    workflow.add_edge(START, "build_prompt")
    workflow.add_edge("build_prompt", "generate")
    workflow.add_edge("generate", "extract_url")
    workflow.add_edge("extract_url", END)

    return workflow.compile()


POSTER_GRAPH = build_poster_graph()
