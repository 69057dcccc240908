"""Paragraph-based excerpts for narrative documents."""

from lightdocs.models import DocumentEntry


class ParagraphExcerpter:
    """Keep every blank-line delimited paragraph that mentions a query term.

    When nothing matches, fall back to the opening lines of the document.
    """

    PREVIEW_LINES = 15

    def extract(
        self,
        document: DocumentEntry,
        terms: list[str],
        include_code: bool = True,
        expand_context: bool = True,
    ) -> str:
        lines = document.content.split("\n")

        paragraphs: list[str] = []
        current: list[str] = []
        for line in lines:
            if line.strip():
                current.append(line)
                continue
            if current:
                paragraphs.append("\n".join(current) + "\n")
                current = []
        if current:
            paragraphs.append("\n".join(current) + "\n")

        matched = [p for p in paragraphs if self._mentions(p, terms)]
        if matched:
            return "".join(p + "\n\n" for p in matched)

        preview = "\n".join(lines[: self.PREVIEW_LINES])
        if len(lines) > self.PREVIEW_LINES:
            preview += "\n\n..."
        return preview

    @staticmethod
    def _mentions(paragraph: str, terms: list[str]) -> bool:
        lowered = paragraph.lower()
        return any(term in lowered for term in terms)
