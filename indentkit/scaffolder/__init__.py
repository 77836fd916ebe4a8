"""indentkit scaffolder -- builds directory trees from an indented outline.

Quick usage::

    from indentkit.scaffolder import build_tree

    ops = build_tree("root", "src/\n\tfile.txt\n\t\thello\n", scaffold=True)
    # [mkdir root, mkdir root/src, write root/src/file.txt 'hello']
"""

from indentkit.scaffolder.tree import (
    FileOp,
    ScaffoldClassifier,
    TreeBuilder,
    build_tree,
    build_tree_from_file,
    file_ops_table,
    print_file_ops,
)

__all__ = [
    "FileOp",
    "ScaffoldClassifier",
    "TreeBuilder",
    "build_tree",
    "build_tree_from_file",
    "file_ops_table",
    "print_file_ops",
]
