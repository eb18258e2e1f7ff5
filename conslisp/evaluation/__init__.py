from conslisp.evaluation.evaluator import Evaluator
