"""Visitor demo: a new visitor needs no change to the element classes."""

from patternette import CountingVisitor, ElementVariant1, ElementVariant2, Visitor, Visitor1


class Describe(Visitor):  # noqa: D101
    def visit_element_variant1(self, element):
        return f"variant 1 ({element.name})"

    def visit_element_variant2(self, element):
        return f"variant 2 ({element.name})"


elements = [ElementVariant1("a"), ElementVariant2("b"), ElementVariant1("c")]

if __name__ == "__main__":
    Visitor1().visit_all(elements)
    print(Describe().visit_all(elements))
    counter = CountingVisitor()
    counter.visit_all(elements)
    print(dict(counter.counts))
