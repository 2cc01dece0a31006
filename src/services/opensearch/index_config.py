import json
import re
from typing import Any, Dict, Union

# Backing index for analyzer definitions: <settings index>_analyzer
ANALYZER_INDEX_SUFFIX = "_analyzer"

# Placeholder in the analyzer settings template
DICTIONARY_PATH_PLACEHOLDER = "${fess.dictionary.path}"

# Error type the engine reports for an unknown analyzer name
UNDEFINED_ANALYZER_ERROR_TYPE = "illegal_argument_exception"
UNDEFINED_ANALYZER_REASON = re.compile(r"failed to find (global )?analyzer")

# Sample text for analyzer probes
PROBE_TEXT = "text"


def analyzer_index_name(settings_index_name: str) -> str:
    return settings_index_name + ANALYZER_INDEX_SUFFIX


def build_create_body(
    settings: Union[str, Dict[str, Any]],
    mappings: Union[str, Dict[str, Any], None] = None,
) -> Union[str, Dict[str, Any]]:
    """
    Build an index-creation body.

    Raw JSON text is spliced in verbatim so templates reach the engine unchanged;
    dicts are combined into a plain body.
    """
    if isinstance(settings, str) or isinstance(mappings, str):
        parts = [f'"settings":{_as_text(settings)}']
        if mappings is not None:
            parts.append(f'"mappings":{_as_text(mappings)}')
        return "{" + ",".join(parts) + "}"

    body: Dict[str, Any] = {"settings": settings}
    if mappings is not None:
        body["mappings"] = mappings
    return body


def _as_text(value: Union[str, Dict[str, Any]]) -> str:
    return value if isinstance(value, str) else json.dumps(value)
