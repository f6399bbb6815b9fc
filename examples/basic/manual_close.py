"""Validated closing: closes must mirror opens, or the builder raises."""

from simplehtml import HtmlBuilder, StructuralMismatchError

b = HtmlBuilder.manual_closing()
b.p().bold().text("important").close_bold().text(" note").close_p()
print(b.render())

try:
    HtmlBuilder.manual_closing().p().close_span()
except StructuralMismatchError as err:
    print(f"rejected: expected {err.expected}, pending {err.actual}")
