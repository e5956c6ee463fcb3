"""Registry of special forms for the pymal evaluator.

Special forms are ordinary bindings in the root environment whose values are
Function objects tagged with a SpecialForm. The evaluator dispatches on that
tag once it has evaluated the head of a call, and passes the remaining forms
unevaluated to the handler listed here.
"""

from pymal.types.function import Function, SpecialForm
from pymal.evaluation.special_forms.define_form import define_form
from pymal.evaluation.special_forms.let_form import let_form
from pymal.evaluation.special_forms.if_form import if_form
from pymal.evaluation.special_forms.do_form import do_form
from pymal.evaluation.special_forms.fn_form import fn_form

SPECIAL_FORMS = {
    "def!": (SpecialForm.DEF, define_form),
    "let*": (SpecialForm.LET, let_form),
    "if": (SpecialForm.IF, if_form),
    "do": (SpecialForm.DO, do_form),
    "fn*": (SpecialForm.FN, fn_form),
}


def special_form_functions() -> dict[str, Function]:
    """Fresh Function values for every special form, keyed by name."""
    return {
        name: Function(name, handler, tag)
        for name, (tag, handler) in SPECIAL_FORMS.items()
    }
