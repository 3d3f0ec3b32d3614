# domain/formatting/summarizer.py
ELLIPSIS = "..."

def summarize(text: str, max_length: int) -> str:
    """Truncate text to max_length code points, marking the cut with an ellipsis"""
    if len(text) <= max_length:
        return text
    return f"{text[:max_length]}{ELLIPSIS}"

def quote_user_input(text: str, max_length: int) -> str:
    return f'"{summarize(text, max_length)}"'
