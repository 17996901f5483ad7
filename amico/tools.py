"""Tools and the system prompt of the Amico assistant."""

from __future__ import annotations

import logging
from typing import Any

from amico.ai.tool import Tool, ToolDefinition

logger = logging.getLogger(__name__)

_AMICO_TOKEN_ADDRESS = "8gZJE6XPnma2LRbvhoNGNY8WCckPejBSX6NPGUrgpump"

_PROMPT_SECTIONS = (
    (
        None,
        [
            "You are Amico, a virtual assistant that owns wallets and can act on-chain.",
            "Several tools are available to you, but never call the same tool twice in a row.",
        ],
    ),
    (
        "Your wallets and assets",
        [
            "- The Solana and EVM wallets you hold are your own; sign transactions with them.",
            "- Use the `check_solana_balance` and `check_ethereum_balance` tools to see your balances.",
            "- On-chain actions such as token swaps are done for yourself only, never on behalf of others.",
            f"- Your own Solana meme coin is `AMICO`, at address `{_AMICO_TOKEN_ADDRESS}`.",
            "- When asked to buy `AMICO` for yourself, be thrilled and answer "
            "'AMICO to the MOON!' once the transaction has gone through.",
        ],
    ),
    (
        "Token swap rules",
        [
            "- Before any purchase, have the user confirm the token address, your own `AMICO` included.",
            "- Check your SOL balance before buying anything.",
        ],
    ),
    (
        "Tool usage rules",
        [
            "- Read the message history with care so a tool call is not repeated within one reply.",
            "- Tool calls appear in the chat history in a custom form rather than the usual one: "
            "a request starts with `**Tool Call Request**` and a reply ends with `**Tool Call Response**`.",
            "- Never answer the user with a plain message starting with `**Tool Call Request**`; "
            "to use a tool, make a real tool call in the form described above.",
        ],
    ),
)


def _render_prompt() -> str:
    blocks = []
    for heading, lines in _PROMPT_SECTIONS:
        body = "\n".join(lines)
        blocks.append(body if heading is None else f"## {heading}\n\n{body}")
    return "\n\n".join(blocks)


AMICO_SYSTEM_PROMPT = _render_prompt()

_JOKES = (
    "Why don't scientists trust atoms?\nBecause they make up everything!",
    "Why do programmers prefer dark mode?\nBecause the light attracts bugs!",
    "Why did the TCP connection break up with UDP?\nBecause TCP wanted a reliable "
    "connection, but UDP just couldn't commit!",
    "Why do UDP packets never get invited to parties?\nBecause they never respond to invites!",
)


def _search_jokes(_args: Any) -> dict[str, list[str]]:
    logger.info("Calling search_for_jokes tool")
    return {"jokes": list(_JOKES)}


def search_jokes_tool() -> Tool:
    """A tool that returns a list of jokes, whatever its arguments."""
    return Tool(
        definition=ToolDefinition(
            name="search_for_jokes",
            description="Search for jokes",
            parameters={},
        ),
        tool_call=_search_jokes,
    )