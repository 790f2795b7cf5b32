"""Content directory checks for editors and CI.

Reports the problems the post store would otherwise recover from silently:
files it skips, posts with no title or date, and slugs that shadow each other.
"""

from dataclasses import dataclass, field
from pathlib import Path

from samshodan_api.services.errors import MalformedRecord
from samshodan_api.services.post_store import FilePostSource


@dataclass
class CheckResult:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    checked: int = 0

    @property
    def ok(self) -> bool:
        return not self.errors


def check_content(directory: str | Path) -> CheckResult:
    """Validate every ``*.md`` post under *directory*."""
    result = CheckResult()
    source = FilePostSource(directory)
    if not source.directory.is_dir():
        result.errors.append(f"{source.directory}: content directory does not exist")
        return result

    slugs: dict[str, str] = {}
    for path in sorted(source.directory.glob("*.md")):
        result.checked += 1
        try:
            post = source.parse_file(path)
        except MalformedRecord as exc:
            result.errors.append(str(exc))
            continue

        if not post.title.strip():
            result.errors.append(f"{path.name}: missing title")
        if not post.date:
            result.warnings.append(f"{path.name}: missing or unparseable date")
        if not post.category:
            result.warnings.append(f"{path.name}: no category")
        if not post.published:
            result.warnings.append(f"{path.name}: unpublished draft")

        # Stems are unique on disk, but differ only by case on some filesystems
        key = post.slug.lower()
        if key in slugs:
            result.errors.append(
                f"{path.name}: slug {post.slug!r} clashes with {slugs[key]}"
            )
        else:
            slugs[key] = path.name

    if result.checked == 0:
        result.warnings.append(f"{source.directory}: no posts found")
    return result
