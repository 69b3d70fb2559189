# mclay

`mclay` is a small commutative-algebra library. It works with polynomials and
free-module elements over prime fields, matrices of such polynomials, and
monomial ideals. It has no third-party dependencies.

## Installation

```
pip install mclay
```

To run the test suite, install the `test` extra and run pytest:

```
pip install "mclay[test]"
pytest
```

## Modules

| Module | Purpose |
| --- | --- |
| `mclay.poly` | `PolyRing` (variable names, weights, characteristic; `unit`, `var`, `constant`, `normalize`, `compare`) and `Poly`, an immutable polynomial vector with `+`, `-`, unary `-`, `*`, `monic`, `initial`, `scaled_shift`, `leading`, `terms`, `is_zero`. Terms are ordered by weighted degree, then reverse lexicographically, then by row. |
| `mclay.matrix` | `Matrix`: polynomial columns with row degrees and column degrees (`append`, `nrows`, `ncols`, `copy`, `degree_of`); `degree_range` gives the lowest and highest value of a degree list. |
| `mclay.polyparse` | `parse_poly` and `read_poly` read polynomials such as `3a2b-c^(2+1)` or `(x+y)*z`, with implicit multiplication and exponents. Division is by nonzero constants only. Errors raise `PolyParseError`. |
| `mclay.intparse` | `eat_int`, `parse_int`, `read_int`, `collect_int`: integer expressions with `+ - * / & ^ **`, comparisons, `&&`, `\|\|` and `!`; identifiers are resolved through a mapping or callable. Errors raise `ParseError`. |
| `mclay.varnames` | Variable names: single letters, indexed names such as `x[1,2]`, `\|quoted\|` names, and sequences such as `a-e` or `x[1]-x[4]` through `generate_vars`. Also `is_var_start`, `collect_var`, `find_var`, `parse_var`. Errors raise `VariableError`. |
| `mclay.printing` | `format_poly` and `format_matrix`: text for polynomials and matrices; coefficients are shown as small fractions where possible. |
| `mclay.koszul` | `koszul(ring, n, p, matrix=None)` builds the p-th Koszul matrix on the first `n` variables of a `PolyRing`, or on the first-row entries of a `Matrix`; also `binom`, `subset`, `kremove`, `loc`. |
| `mclay.rmap` | `RingMap` sends each source variable to a polynomial of a target `PolyRing` and applies that to terms, polynomials and matrices; `set_image` changes one image, `describe` lists them. `identity_map` matches variables by name. |
| `mclay.monideal` | `MonomialIdeal` (`contains`, `radical`, `divide`, `restrict`) and, for a free module modulo a monomial submodule given as one ideal per row: `codim`, `minimal_primes`, `module_degree`, `monomial_degree`, `find_ass_primes`, `red_exp`, `k_basis`. |
| `mclay.ring` | `Ring`: characteristic, variable names, weights and monomial order blocks (`BlockKind`, `blocks()`), with `var_name`, `var_index`, `weight`, `describe`, `sum` (a ring in the variables of both) and `Ring.from_degrees`. Helpers `choose_characteristic`, `validate_monomial_order`, `normalize_weight_vector`, `positive_weights`. Errors raise `RingError`. |
| `mclay.settings` | `Settings`: named integer options (`verbose`, `linesize`, `maxdegree`, `prlevel`, ...). A prefix selects the first name, in alphabetical order, that it begins. Unknown names raise `SettingError`. |
| `mclay.output` | `Printer`: output that honours `prlevel`, `prcomment`, `linesize` and `iodelay`, and can copy everything into a monitor file. |
| `mclay.fmt` | `format_message`, the printf-style formatter used for output, and `to_base`. |
| `mclay.timer` | `Timer` and `format_elapsed` for "n minutes and m seconds" reports; `InterruptFlag` records Ctrl-C so long computations can poll for it. |

## Example

```python
from mclay.poly import PolyRing
from mclay.polyparse import parse_poly
from mclay.printing import format_poly
from mclay.koszul import koszul
from mclay.monideal import MonomialIdeal, codim

R = PolyRing("xyz")
f = parse_poly(R, "(x+y)^2")
format_poly(R, f, 1)          # 'x^2+2*x*y+y^2'

K = koszul(R, 3, 2)           # 3 x 3 Koszul matrix on x, y, z
K.nrows(), K.ncols()          # (3, 3)

codim([MonomialIdeal(3, [(1, 1, 0), (0, 0, 2)])])   # 2
```

## What it does not do

- There is no interactive command interpreter and no command-line program;
  everything is used from Python.
- There are no standard (Gröbner) bases, resolutions, quotient rings or
  Hilbert functions. The monomial-ideal functions take the monomial ideals
  directly, for instance the lead terms of a basis computed elsewhere.
- `Ring` describes a ring's variables, weights and order blocks, but
  arithmetic is done in `PolyRing`, which always uses its single weighted
  reverse-lexicographic order.