from seid.tree.tree import Node


class NodeVisitor:
    """
    For visiting nodes in our AST
    """

    def visit(self, node: Node, *args, **kwargs):
        """Visit a node, with the `visit_<ClassName>` method of this visitor."""
        method = "visit_" + node.__class__.__name__
        visitor = getattr(self, method)
        return visitor(node, *args, **kwargs)


class YieldVisitor(NodeVisitor):
    """
    For yielding values from nodes in our AST
    """

    def visit(self, node: Node, *args, **kwargs):
        """Visit a node, with the `visit_<ClassName>` method of this visitor."""
        method = "visit_" + node.__class__.__name__
        visitor = getattr(self, method)
        yield from visitor(node, *args, **kwargs)
