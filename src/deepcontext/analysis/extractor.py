"""Local import specifier extraction for JavaScript/TypeScript sources.

Extraction is pattern based rather than a parse, so import-like text inside
comments or string literals is reported as well.
"""

import re

# import X from '...', import { A, B } from '...', import * as X from '...',
# import '...'. The clause may span lines. Only specifiers starting with
# '.', '/' or '@' are captured; bare package names are left out.
IMPORT_PATTERN = re.compile(r"""import\s+(?:(?:[\w*\s{},]*)\s+from\s+)?['"]([@./][^'"]+)['"]""")


def extract_imports(content: str) -> list[str]:
    """Return local import specifiers in order of appearance, duplicates kept."""
    normalized_content = content.replace("\r\n", "\n").replace("\r", "\n")
    return [match.group(1) for match in IMPORT_PATTERN.finditer(normalized_content)]
