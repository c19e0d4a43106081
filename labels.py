from typing import Dict, Iterable, List, Tuple


class VertexLabels:
    """
    Convert between array indexes (starting from 0) & human readable vertex names.
    The matching core never sees these, it only works on indices.
    """

    def __init__(self, names: Iterable[str]):
        self.names: List[str] = [str(name) for name in names]
        self._index: Dict[str, int] = {}
        for i, name in enumerate(self.names):
            if name in self._index:
                raise ValueError(f"duplicate vertex name '{name}'")
            self._index[name] = i

    def name(self, index: int) -> str:
        return self.names[index]

    def index(self, name: str) -> int:
        try:
            return self._index[name]
        except KeyError:
            raise ValueError(f"unknown vertex name '{name}'") from None

    def format_pair(self, pair: Tuple[int, int]) -> str:
        left, right = pair
        return f"{self.name(left)} & {self.name(right)}"

    def __len__(self) -> int:
        return len(self.names)
