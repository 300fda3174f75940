from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class Span:
    line: int
    col: int


@dataclass
class Stmt:
    kind: str  # 'chart', 'labels' or 'slice'
    span: Span
    data: Dict[str, Any] = field(default_factory=dict)
    opts: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Program:
    stmts: List[Stmt] = field(default_factory=list)

    def of_kind(self, kind: str) -> List[Stmt]:
        return [stmt for stmt in self.stmts if stmt.kind == kind]
