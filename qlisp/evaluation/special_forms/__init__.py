"""Registry of special forms for the qlisp evaluator.

Special forms are ordinary builtins registered in the global frame; what sets
them apart is that they decide for themselves which of their unevaluated
arguments get evaluated, and when.
"""

from qlisp.evaluation.special_forms.cond_form import cond_form
from qlisp.evaluation.special_forms.defun_form import defun_form
from qlisp.evaluation.special_forms.if_form import if_form
from qlisp.evaluation.special_forms.lambda_form import lambda_form
from qlisp.evaluation.special_forms.setq_form import setq_form

SPECIAL_FORMS = {
    "setq": setq_form,
    "defun": defun_form,
    "lambda": lambda_form,
    "if": if_form,
    "cond": cond_form,
}
