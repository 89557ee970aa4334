"""Recursive translation tree walker.

Rebuilds a namespace tree with every leaf passed through the transform
pipeline. The input tree is never modified.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from infrastructure.logging import get_module_logger
from modules.translations.errors import DuplicateKey, MalformedPluralSyntax
from modules.translations.models import Group, Leaf, LeafError, TranslationNode
from modules.translations.pipeline import transform_leaf, transform_text

logger = get_module_logger()


@dataclass
class WalkResult:
    """Transformed tree plus the per-leaf errors collected on the way."""

    tree: Group
    errors: List[LeafError] = field(default_factory=list)


def _join(path: Tuple[str, ...]) -> str:
    return ".".join(path)


def _transform_leaf(
    key: str, leaf: Leaf, path: Tuple[str, ...], errors: List[LeafError]
) -> List[Tuple[str, str]]:
    try:
        return transform_leaf(key, leaf.text)
    except MalformedPluralSyntax as e:
        logger.warning(
            "plural_syntax_malformed",
            path=_join(path),
            reason=e.reason,
        )
        errors.append(LeafError(path=_join(path), error=e))
        # Keep the leaf under its own key with the content transforms applied
        return [(key, transform_text(leaf.text))]


def _walk_group(
    group: Group, path: Tuple[str, ...], errors: List[LeafError]
) -> Group:
    entries: Dict[str, TranslationNode] = {}

    for key, node in group.items():
        node_path = path + (key,)

        if isinstance(node, Group):
            emitted = [(key, _walk_group(node, node_path, errors))]
        else:
            emitted = [
                (out_key, Leaf(text))
                for out_key, text in _transform_leaf(key, node, node_path, errors)
            ]

        for out_key, out_node in emitted:
            if out_key in entries:
                logger.warning("duplicate_output_key", path=_join(path + (out_key,)))
                errors.append(
                    LeafError(path=_join(path + (out_key,)), error=DuplicateKey(out_key))
                )
                continue
            entries[out_key] = out_node

    return Group(entries)


def walk(tree: Group) -> WalkResult:
    """Transform every leaf of a namespace tree.

    Groups are visited depth-first and keep their keys and order. A leaf may
    be replaced by up to three suffixed siblings. Failures on a leaf are
    recorded in the result and never abort the walk: a malformed plural leaf
    is kept under its own key with only the content transforms applied, and
    a key emitted twice keeps its first value.

    Args:
        tree: Namespace root.

    Returns:
        WalkResult with a new tree and the collected errors.
    """
    errors: List[LeafError] = []
    result = _walk_group(tree, (), errors)
    return WalkResult(tree=result, errors=errors)
