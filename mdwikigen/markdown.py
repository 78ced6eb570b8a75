"""Small Markdown/HTML building helpers used by the page renderers."""


def code_quote(code: str) -> str:
    """Wrap text in an inline HTML code element."""
    return f"<code>{code}</code>"


def md_header(level: int, text: str) -> str:
    return f"{'#' * level} {text}"


def md_link(text: str, url: str) -> str:
    return f"[{text}]({url})"


def md_codeblock(lang: str, code: str) -> str:
    """Generate a fenced Markdown code block."""
    return f"```{lang}\n{code.rstrip()}\n```"


def md_table(headers: list[str], rows: list[list[str]]) -> str:
    """Generate a Markdown table; empty when there are no rows."""
    if not rows:
        return ""
    out = [
        "| " + " | ".join(headers) + " |",
        "| " + " | ".join("---" for _ in headers) + " |",
    ]
    out.extend("| " + " | ".join(cell.replace("|", "\\|") for cell in r) + " |" for r in rows)
    return "\n".join(out)


def single_line(text: str) -> str:
    """Collapse line breaks so text fits in a table cell or summary line."""
    return " ".join(text.replace("\r\n", "\n").replace("\r", "\n").split("\n"))
