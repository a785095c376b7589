"""Element lookup and interaction tools."""

from typing import Annotated, Literal, Optional
from pydantic import Field
from fastmcp import FastMCP, Context
import anyio

from ..core.responses import ELEMENT_NOT_FOUND
from ..utils.locators import get_by_strategy
from .common import get_client, outcome_result, tool_error

elements_router = FastMCP(
    name="ElementTools",
    instructions="Find elements, read and write their text, click and select",
)

ElementRef = Annotated[
    Optional[int],
    Field(description="Element reference from find_element"),
]
Selector = Annotated[
    Optional[str],
    Field(description="Locator value, used when element_ref is not given"),
]
Strategy = Annotated[
    str,
    Field(
        description=(
            "Locator strategy: id, name, link text, partial link text, "
            "tag name, class name, css selector, xpath (or css, class, tag, link_text)"
        )
    ),
]


def _resolve_target(element_ref: Optional[int], selector: Optional[str], strategy: str) -> str:
    """Check that a target was given and return the wire name of the strategy."""
    if element_ref is None and not selector:
        raise ValueError("Must provide either element_ref or selector")
    return get_by_strategy(strategy)


@elements_router.tool(
    description="Find an element and return its reference",
    tags={"element", "query"},
)
async def find_element(
    ctx: Context,
    session_id: Annotated[str, Field(description="Active session ID")],
    selector: Annotated[str, Field(description="Locator value")],
    strategy: Strategy = "id",
) -> dict:
    """
    Search for an element from the document root.

    Returns:
        element_ref (-1 when nothing matched) and a found flag
    """
    try:
        using = get_by_strategy(strategy)
        client = get_client(ctx)
        element_ref = await anyio.to_thread.run_sync(
            lambda: client.find_element(session_id, selector, using)
        )

        return {
            "success": True,
            "session_id": session_id,
            "element_ref": element_ref,
            "found": element_ref != ELEMENT_NOT_FOUND,
        }

    except Exception as e:
        raise tool_error(e)


@elements_router.tool(
    description="Get the visible text of an element",
    tags={"element", "observation"},
)
async def get_element_text(
    ctx: Context,
    session_id: Annotated[str, Field(description="Active session ID")],
    element_ref: ElementRef = None,
    selector: Selector = None,
    strategy: Strategy = "id",
) -> dict:
    """Visible text of an element; "" when the selector matches nothing."""
    try:
        using = _resolve_target(element_ref, selector, strategy)
        client = get_client(ctx)
        if element_ref is not None:
            text = await anyio.to_thread.run_sync(
                lambda: client.get_element_text_by_ref(session_id, element_ref)
            )
        else:
            text = await anyio.to_thread.run_sync(
                lambda: client.get_element_text(session_id, selector, using)
            )

        return {
            "success": True,
            "session_id": session_id,
            "text": text,
        }

    except Exception as e:
        raise tool_error(e)


@elements_router.tool(
    description="Type text into an element",
    tags={"element", "action"},
)
async def set_element_text(
    ctx: Context,
    session_id: Annotated[str, Field(description="Active session ID")],
    text: Annotated[str, Field(description="Text to send as keystrokes")],
    element_ref: ElementRef = None,
    selector: Selector = None,
    strategy: Strategy = "id",
) -> dict:
    """Send a sequence of keystrokes to an element."""
    try:
        using = _resolve_target(element_ref, selector, strategy)
        client = get_client(ctx)
        if element_ref is not None:
            outcome = await anyio.to_thread.run_sync(
                lambda: client.set_element_text_by_ref(session_id, text, element_ref)
            )
        else:
            outcome = await anyio.to_thread.run_sync(
                lambda: client.set_element_text(session_id, text, selector, using)
            )

        return outcome_result(session_id, "typed", outcome)

    except Exception as e:
        raise tool_error(e)


@elements_router.tool(
    description="Click an element",
    tags={"element", "action"},
)
async def click_element(
    ctx: Context,
    session_id: Annotated[str, Field(description="Active session ID")],
    element_ref: ElementRef = None,
    selector: Selector = None,
    strategy: Strategy = "id",
) -> dict:
    """Click an element by reference, or find it by selector and click it."""
    try:
        using = _resolve_target(element_ref, selector, strategy)
        client = get_client(ctx)
        if element_ref is not None:
            outcome = await anyio.to_thread.run_sync(
                lambda: client.click_on_element_by_ref(session_id, element_ref)
            )
        else:
            outcome = await anyio.to_thread.run_sync(
                lambda: client.click_on_element(session_id, selector, using)
            )

        return outcome_result(session_id, "clicked", outcome)

    except Exception as e:
        raise tool_error(e)


@elements_router.tool(
    description="Clear a text input or textarea",
    tags={"element", "action"},
)
async def clear_element(
    ctx: Context,
    session_id: Annotated[str, Field(description="Active session ID")],
    element_ref: ElementRef = None,
    selector: Selector = None,
    strategy: Strategy = "id",
) -> dict:
    """Clear a textarea or text input element's value."""
    try:
        using = _resolve_target(element_ref, selector, strategy)
        client = get_client(ctx)
        if element_ref is not None:
            outcome = await anyio.to_thread.run_sync(
                lambda: client.clear_element_text_by_ref(session_id, element_ref)
            )
        else:
            outcome = await anyio.to_thread.run_sync(
                lambda: client.clear_element_text(session_id, selector, using)
            )

        return outcome_result(session_id, "cleared", outcome)

    except Exception as e:
        raise tool_error(e)


@elements_router.tool(
    description="Check whether an element is displayed",
    tags={"element", "observation"},
)
async def is_element_visible(
    ctx: Context,
    session_id: Annotated[str, Field(description="Active session ID")],
    element_ref: ElementRef = None,
    selector: Selector = None,
    strategy: Strategy = "id",
) -> dict:
    """Whether an element is displayed; False when the selector matches nothing."""
    try:
        using = _resolve_target(element_ref, selector, strategy)
        client = get_client(ctx)
        if element_ref is not None:
            visible = await anyio.to_thread.run_sync(
                lambda: client.is_element_visible_by_ref(session_id, element_ref)
            )
        else:
            visible = await anyio.to_thread.run_sync(
                lambda: client.is_element_visible(session_id, selector, using)
            )

        return {
            "success": True,
            "session_id": session_id,
            "visible": visible,
        }

    except Exception as e:
        raise tool_error(e)


@elements_router.tool(
    description="Select an option in a <select> box by value or visible text",
    tags={"element", "action", "select"},
)
async def select_option(
    ctx: Context,
    session_id: Annotated[str, Field(description="Active session ID")],
    select_selector: Annotated[str, Field(description="The select box's id or name")],
    option: Annotated[str, Field(description="Option value, or its visible text when by='text'")],
    select_strategy: Annotated[
        Literal["id", "name"],
        Field(description="Whether select_selector is an id or a name"),
    ] = "id",
    by: Annotated[
        Literal["value", "text"],
        Field(description="Match the option by its value attribute or its visible text"),
    ] = "value",
) -> dict:
    """
    Select an option of a select box by clicking it.

    Args:
        session_id: Active session ID
        select_selector: id or name of the select box
        option: Option value or visible text
        select_strategy: "id" or "name"
        by: "value" or "text"

    Returns:
        Outcome of the click (not_attempted when no option matched)
    """
    try:
        client = get_client(ctx)
        if by == "text":
            outcome = await anyio.to_thread.run_sync(
                lambda: client.set_select_option_by_text(
                    session_id, option, select_selector, select_strategy
                )
            )
        else:
            outcome = await anyio.to_thread.run_sync(
                lambda: client.set_select_option(
                    session_id, option, select_selector, select_strategy
                )
            )

        return outcome_result(session_id, "selected", outcome, option=option, by=by)

    except Exception as e:
        raise tool_error(e)
