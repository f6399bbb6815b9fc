"""Build a small HTML page with an auto-closing builder."""

from simplehtml import HtmlBuilder

html = HtmlBuilder.auto_closing().html_and_body().h(1).text("Hello").p().text("World").render()
print(html)
