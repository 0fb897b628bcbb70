from typing import Any, Dict, List

REQUIRED_TEXT_FIELDS = ("title", "author")
REQUIRED_INT_FIELDS = ("pages", "published_year")


class BookValidator:
    """Shape checks for Book fields, used only when strict construction is on.

    Each check returns a list of problems instead of raising, so the caller can
    report every bad field in one error.
    """

    @staticmethod
    def _is_non_empty_text(value: Any) -> bool:
        return isinstance(value, str) and bool(value.strip())

    @staticmethod
    def _is_int(value: Any) -> bool:
        # bool is an int subclass; True pages is not a page count
        return isinstance(value, int) and not isinstance(value, bool)

    @staticmethod
    def _is_label_list(value: Any) -> bool:
        return isinstance(value, list) and all(isinstance(v, str) for v in value)

    @staticmethod
    def validate(fields: Dict[str, Any]) -> List[str]:
        problems: List[str] = []
        for name in REQUIRED_TEXT_FIELDS:
            if not BookValidator._is_non_empty_text(fields.get(name)):
                problems.append(f"{name} must be non-empty text")
        for name in REQUIRED_INT_FIELDS:
            if not BookValidator._is_int(fields.get(name)):
                problems.append(f"{name} must be an integer")
        if BookValidator._is_int(fields.get("pages")) and fields["pages"] < 0:
            problems.append("pages must not be negative")
        for name in ("genres", "tags"):
            if not BookValidator._is_label_list(fields.get(name)):
                problems.append(f"{name} must be a list of text labels")
        return problems
