"""Shared behaviour of the surface and nameless expression trees."""


class Node:
    """Superclass of every expression node, surface or nameless. Subclasses are frozen dataclasses."""

    @property
    def nodes(self):
        """Child expressions, left to right. Leaves have none."""
        return []

    def display(self, indents=0):
        """Recursively displays the tree with readable format.

        Format:
        <Node>(expr='<expr>', nodes=[
            <Node>(expr='<expr>', nodes=[
                ...
                <Node>(expr='<expr>')  # <-- if nodes is empty
            ])
        ])
        """
        result = f"{'    ' * indents}{type(self).__name__}(expr='{self}'"
        if self.nodes:
            result += ", nodes=["
            for node in self.nodes:
                result += "\n" + node.display(indents + 1) + ","
            result = result[:-1] + f"\n{'    ' * indents}]"
        return result + ")"
