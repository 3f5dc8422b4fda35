"""Hook chain for serviceforge.

Stores the before hooks declared on one service class. Follows the same
parent-linked pattern as ParameterRegistry, but hooks are purely additive:
there is no override or removal.
"""

from typing import Any, Iterator

from serviceforge.hooks.types import HookAction, HookRef


class HookChain:
    """Ordered, append-only list of before hooks for one class.

    The effective chain is the parent's effective chain followed by the
    hooks registered on this class, so inherited hooks always run first.

    Example:
        chain = HookChain("MyService")
        chain.register("set_start_time", "say_hello")
        chain.register(action=lambda svc: print("started"))
        [h.label for h in chain.effective()]
        # ["set_start_time", "say_hello", "<lambda>"]
    """

    def __init__(self, owner: str, parent: "HookChain | None" = None):
        self.owner = owner
        self.parent = parent
        self._own: list[HookRef] = []

    def register(self, *hooks: Any, action: HookAction | None = None) -> None:
        """Append hooks to this class's chain.

        Args:
            *hooks: Method names, or callables taking the service instance
            action: Optional inline callable appended after ``hooks``

        Raises:
            HookDeclarationError: If a hook is neither a name nor a callable
        """
        refs = [HookRef.from_value(h) for h in hooks]
        if action is not None:
            refs.append(HookRef.action(action))
        self._own.extend(refs)

    def own(self) -> list[HookRef]:
        return list(self._own)

    def effective(self) -> list[HookRef]:
        inherited = self.parent.effective() if self.parent is not None else []
        return inherited + self._own

    def __iter__(self) -> Iterator[HookRef]:
        return iter(self.effective())

    def __len__(self) -> int:
        return len(self.effective())

    def __repr__(self) -> str:
        return f"HookChain({self.owner!r}, {[h.label for h in self.effective()]!r})"
