from properties_reader.parser import Document


class Merger:
    """Merges parsed documents with shallow override semantics"""

    @staticmethod
    def merge(accumulator: Document, addition: Document | None) -> Document:
        """
        Overlay the top-level keys of addition onto accumulator.

        Nested documents are replaced as a whole, never merged recursively.
        The accumulator is updated in place and returned.

        Example:
            merge({"a": 1, "b": {"x": 1}}, {"b": {"y": 2}}) -> {"a": 1, "b": {"y": 2}}
        """
        if not addition:
            return accumulator

        accumulator |= addition
        return accumulator

    @staticmethod
    def merge_all(*documents: Document | None) -> Document:
        """
        Merge multiple documents with override cascade.
        Later documents override earlier ones on key conflicts.
        """
        result: Document = {}
        for document in documents:
            Merger.merge(result, document)
        return result
