from typing import Any, Mapping, Sequence

REPLY_PATH = ('candidates', 0, 'content', 'parts', 0, 'text')


def build_payload(text: str) -> dict[str, Any]:
    return {'contents': [{'parts': [{'text': text}]}]}


def dig(tree: Any, *path: Any, default: Any = None) -> Any:
    """
    Walk ``path`` through nested dicts and lists, returning ``default`` as
    soon as a step is missing or has the wrong container type.
    """
    node = tree
    for step in path:
        if isinstance(step, int):
            if not isinstance(node, Sequence) or isinstance(node, (str, bytes)):
                return default
            if not -len(node) <= step < len(node):
                return default
            node = node[step]
        else:
            if not isinstance(node, Mapping) or step not in node:
                return default
            node = node[step]
        if node is None:
            return default
    return node


def extract_reply_text(document: Any) -> str:
    """
    Pull ``candidates[0].content.parts[0].text`` out of a decoded response.
    """
    text = dig(document, *REPLY_PATH, default='')
    return text if isinstance(text, str) else ''
