"""Registry of special forms for the Cloji evaluator.

Maps names to SpecialForm wrappers. Every entry receives the live scope and
its raw argument nodes, so each form controls its own evaluation rules. The
table is installed, together with the operators, as the core scope.
"""

from cloji.types.function import SpecialForm
from cloji.evaluation.special_forms.basic_forms import comment_form, print_form
from cloji.evaluation.special_forms.define_form import def_form, set_form
from cloji.evaluation.special_forms.lambda_form import fn_form, defn_form, jsfn_form
from cloji.evaluation.special_forms.if_form import if_form
from cloji.evaluation.special_forms.cond_form import cond_form
from cloji.evaluation.special_forms.struct_forms import object_form, array_form
from cloji.evaluation.special_forms.interop_forms import new_form, aget_form, aset_form
from cloji.evaluation.special_forms.thread_forms import thread_form, doto_form

_FORMS = {
    "##": comment_form,
    "def": def_form,
    "set": set_form,
    "fn": fn_form,
    "defn": defn_form,
    "jsfn": jsfn_form,
    "print": print_form,
    "if": if_form,
    "cond": cond_form,
    "object": object_form,
    "array": array_form,
    "new": new_form,
    "aget": aget_form,
    "aset": aset_form,
    "thread": thread_form,
    "doto": doto_form,
}

SPECIAL_FORMS = {name: SpecialForm(name, fn) for name, fn in _FORMS.items()}
