"""Structure-aware excerpts for reference and overview documents."""

from lightdocs.models import DocumentEntry

CODE_FENCE = "```"


class StructuredExcerpter:
    """Walk the document line by line up to its third heading.

    Keeps headings, lines mentioning a query term, table and list lines,
    and optionally code blocks and the neighbours of matching lines.
    """

    MAX_HEADINGS = 3

    def extract(
        self,
        document: DocumentEntry,
        terms: list[str],
        include_code: bool = True,
        expand_context: bool = True,
    ) -> str:
        lines = document.content.split("\n")
        kept: list[str] = []
        headings = 0
        in_code = False

        for i, line in enumerate(lines):
            if headings >= self.MAX_HEADINGS:
                break

            if line.startswith(CODE_FENCE):
                in_code = not in_code
                if include_code:
                    kept.append(line)
                continue

            if in_code:
                if include_code:
                    kept.append(line)
                continue

            if line.startswith("#"):
                headings += 1
                kept.append(line)
            elif self._mentions(line, terms):
                kept.append(line)
            elif "|" in line or line.startswith("*") or line.startswith("-"):
                kept.append(line)
            elif expand_context and 0 < i < len(lines) - 1:
                if self._mentions(lines[i - 1], terms) or self._mentions(lines[i + 1], terms):
                    kept.append(line)

        return "".join(line + "\n" for line in kept)

    @staticmethod
    def _mentions(line: str, terms: list[str]) -> bool:
        lowered = line.lower()
        return any(term in lowered for term in terms)
