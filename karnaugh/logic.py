"""Boolean formula synthesis from Karnaugh map groups."""

from __future__ import annotations

import enum
from typing import Dict, List, Mapping, NamedTuple, Sequence

from sympy import And, Not, Or, Symbol, false, true

from .geometry import GroupRect
from .grid import KMap
from .kmap_engine import get_filtered_groups, group_cells


class Literal(enum.Enum):
    """How a variable takes part in one term."""

    ASSERTED = "asserted"
    NEGATED = "negated"
    IRRELEVANT = "irrelevant"


Term = Dict[str, Literal]


class Minimization(NamedTuple):
    sop_groups: List[GroupRect]
    sop_terms: List[Term]
    sop: str
    pos_groups: List[GroupRect]
    pos_terms: List[Term]
    pos: str


class Mismatch(NamedTuple):
    assignment: Dict[str, bool]
    expected: bool
    got: bool


def group_term(kmap: KMap, group: GroupRect) -> Term:
    """Literal pattern of a single group, keyed in declaration order.

    A variable is relevant only if it holds one constant state over every
    loaded cell of the group; it is asserted when that state equals the
    group's value and negated otherwise.
    """
    cells = group_cells(kmap, group)
    target = cells[0].value if cells else None

    term: Term = {}
    for var in kmap.variables:
        states = [cell.state_of(var) for cell in cells]
        if target is None or None in states or len(set(states)) != 1:
            term[var] = Literal.IRRELEVANT
        elif states[0] == target:
            term[var] = Literal.ASSERTED
        else:
            term[var] = Literal.NEGATED
    return term


def get_formula(kmap: KMap, value: bool) -> List[Term]:
    """One term per irredundant group; ``value`` True gives SOP, False gives POS."""
    return [group_term(kmap, group) for group in get_filtered_groups(kmap, value)]


def _literal_text(var: str, literal: Literal) -> str:
    return f"!{var}" if literal is Literal.NEGATED else var


def render_formula(terms: Sequence[Mapping[str, Literal]], value: bool) -> str:
    """Render terms as ``(A x !B) + (C)`` for SOP or ``(A + !B) x (C)`` for POS."""
    outer = " + " if value else " x "
    inner = " x " if value else " + "
    parts = []
    for term in terms:
        literals = [
            _literal_text(var, literal)
            for var, literal in term.items()
            if literal is not Literal.IRRELEVANT
        ]
        parts.append(f"({inner.join(literals)})")
    return outer.join(parts)


def get_formula_string(kmap: KMap, value: bool) -> str:
    return render_formula(get_formula(kmap, value), value)


def minimize(kmap: KMap) -> Minimization:
    """Run both the SOP and the POS pass over the map."""
    sop_groups = get_filtered_groups(kmap, True)
    pos_groups = get_filtered_groups(kmap, False)
    sop_terms = [group_term(kmap, g) for g in sop_groups]
    pos_terms = [group_term(kmap, g) for g in pos_groups]
    return Minimization(
        sop_groups=sop_groups,
        sop_terms=sop_terms,
        sop=render_formula(sop_terms, True),
        pos_groups=pos_groups,
        pos_terms=pos_terms,
        pos=render_formula(pos_terms, False),
    )


# --------------------------------------------------------------- SymPy bridge
def get_symbols(variables: Sequence[str]) -> Dict[str, Symbol]:
    """Return SymPy symbols keyed by variable name."""
    return {var: Symbol(var) for var in variables}


def term_to_sympy(term: Mapping[str, Literal], value: bool, symbols: Mapping[str, Symbol]):
    """Product (``value`` True) or sum (``value`` False) of the term's literals."""
    literals = []
    for var, literal in term.items():
        if literal is Literal.ASSERTED:
            literals.append(symbols[var])
        elif literal is Literal.NEGATED:
            literals.append(Not(symbols[var]))
    return And(*literals) if value else Or(*literals)


def formula_to_sympy(terms: Sequence[Mapping[str, Literal]], value: bool, variables: Sequence[str]):
    """SymPy expression for a whole SOP/POS result.

    An empty SOP is false and an empty POS is true, which is what SymPy's
    ``Or()`` and ``And()`` already evaluate to.
    """
    symbols = get_symbols(variables)
    clauses = [term_to_sympy(term, value, symbols) for term in terms]
    return Or(*clauses) if value else And(*clauses)


def evaluate_formula(
    terms: Sequence[Mapping[str, Literal]], value: bool, assignment: Mapping[str, bool]
) -> bool:
    """Evaluate the rendered formula for one assignment without going through SymPy."""

    def holds(var: str, literal: Literal) -> bool:
        state = bool(assignment[var])
        return state if literal is Literal.ASSERTED else not state

    relevant = [
        [(var, lit) for var, lit in term.items() if lit is not Literal.IRRELEVANT]
        for term in terms
    ]
    if value:
        return any(all(holds(var, lit) for var, lit in lits) for lits in relevant)
    return all(any(holds(var, lit) for var, lit in lits) for lits in relevant)


def verify_formula(kmap: KMap, value: bool) -> List[Mismatch]:
    """Rows of the map whose outcome the minimized formula fails to reproduce."""
    symbols = get_symbols(kmap.variables)
    expr = formula_to_sympy(get_formula(kmap, value), value, kmap.variables)
    mismatches = []
    for cell in kmap.cells:
        assignment = {**cell.row.values, **cell.col.values}
        subs = {symbols[var]: (true if state else false) for var, state in assignment.items()}
        got = bool(expr.xreplace(subs))
        if got != cell.value:
            ordered = {var: assignment[var] for var in kmap.variables}
            mismatches.append(Mismatch(assignment=ordered, expected=cell.value, got=got))
    return mismatches


__all__ = [
    "Literal",
    "Minimization",
    "Mismatch",
    "Term",
    "evaluate_formula",
    "formula_to_sympy",
    "get_formula",
    "get_formula_string",
    "get_symbols",
    "group_term",
    "minimize",
    "render_formula",
    "term_to_sympy",
    "verify_formula",
]
