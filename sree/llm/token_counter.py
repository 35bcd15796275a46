"""Rough token estimates for context management."""


def estimate_tokens(text: str) -> int:
    """Approximate token count: about four UTF-8 bytes per token, rounded up."""
    return -(-len(text.encode("utf-8")) // 4)


def estimate_message_tokens(content: str) -> int:
    """Token estimate for a message, including structural overhead."""
    return estimate_tokens(content) + 4