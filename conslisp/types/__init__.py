from conslisp.types.symbol import Symbol
from conslisp.types.persistent_list import PersistentList, Pair, EMPTY
from conslisp.types.operators import SpecialForm, BinaryOp, BinaryPred
from conslisp.types.environment import Environment
