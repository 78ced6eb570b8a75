"""Index of doc comments keyed by class key."""

from collections.abc import Iterable, Iterator

from mdwikigen.doc_comment import DocComment, MemberType


class CommentIndex:
    """Groups DocComment records by class key, preserving document order.

    Duplicates are retained; picking the right record is the resolver's job.
    """

    def __init__(self, comments: Iterable[DocComment] = ()) -> None:
        """Build the index from parsed comments."""
        self._by_class: dict[str, list[DocComment]] = {}
        for c in comments:
            self._by_class.setdefault(c.class_name, []).append(c)

    def __getitem__(self, class_key: str) -> tuple[DocComment, ...]:
        return tuple(self._by_class.get(class_key, ()))

    def __contains__(self, class_key: object) -> bool:
        return class_key in self._by_class

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_class)

    def __len__(self) -> int:
        return len(self._by_class)

    def type_comment(self, class_key: str) -> DocComment | None:
        """Return the comment describing the type itself, if present."""
        for c in self._by_class.get(class_key, ()):
            if c.member_type is MemberType.TYPE:
                return c
        return None
