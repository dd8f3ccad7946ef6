import json
from typing import Any, Dict

from models import MalformedTreeError


class TreePayloadParser:
    """
    Adapter for decision trees arriving as text (CLI arguments, files, request
    bodies). The text is expected to be a JSON object with rootAction and an
    optional context.
    """

    def parse(self, text: str) -> Dict[str, Any]:
        """
        Parse the text into a dictionary ready for DecisionTree.from_json.

        Raises MalformedTreeError if the text is not JSON or not a JSON object.
        """
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedTreeError(f"Invalid decision tree JSON: {e.msg}") from e

        if not isinstance(payload, dict):
            raise MalformedTreeError("Invalid decision tree JSON: expected an object")
        return payload
