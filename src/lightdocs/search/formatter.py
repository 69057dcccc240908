"""Plain-text rendering of search outcomes."""

from lightdocs.models import SearchOutcome

RESULTS_HEADER = "# ZK Compression Documentation Search Results"


def format_no_results(query: str, section: str | None = None) -> str:
    message = f'No results found for "{query}"'
    if section:
        message += f' in section "{section}"'
    return message


def format_outcome(outcome: SearchOutcome) -> str:
    """Render a SearchOutcome as the markdown block returned to the caller.

    Args:
        outcome: Results of one search_docs call

    Returns:
        Markdown text with a header and one ranked section per result
    """
    if not outcome.results:
        return format_no_results(outcome.query, outcome.section)

    count = len(outcome.results)
    kind = "comprehensive" if outcome.used_comprehensive else outcome.mode

    lines = [
        RESULTS_HEADER,
        "",
        f'**Query:** "{outcome.query}"',
        f"**Found:** {count} result{'' if count == 1 else 's'} ({kind} search)",
        f"**Mode:** {outcome.mode} | **Filter:** {outcome.content_filter}",
        "",
    ]

    for i, result in enumerate(outcome.results, 1):
        doc = result.document
        lines.append(f"## {i}. {doc.title}")
        lines.append(f"**Path:** `{doc.relative_path}`")
        lines.append(f"**Section:** {doc.section}")
        if doc.method_name:
            lines.append(f"**Method:** `{doc.method_name}`")
        lines.append(f"**Relevance:** {result.relevance}%")
        lines.append("")
        lines.append("```markdown")
        lines.append(result.excerpt)
        lines.append("```")
        lines.append("")
        lines.append("---")
        lines.append("")

    return "\n".join(lines)
