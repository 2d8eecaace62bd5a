"""Tests for Factory Method and Abstract Factory."""
import pytest

from design_patterns.creational.abstract_factory import (
    AbstractFactory,
    ConcreteFactory1,
    ConcreteFactory2,
    ProductX1,
    ProductX2,
    ProductY1,
    ProductY2,
)
from design_patterns.creational.factory_method import (
    ConcreteCreatorA,
    ConcreteCreatorB,
    ConcreteCreatorC,
    ConcreteProductA,
    ConcreteProductB,
    ConcreteProductC,
    Creator,
    Product,
)


class TestFactoryMethod:
    @pytest.mark.parametrize(
        "creator_class, product_class",
        [
            (ConcreteCreatorA, ConcreteProductA),
            (ConcreteCreatorB, ConcreteProductB),
            (ConcreteCreatorC, ConcreteProductC),
        ],
    )
    def test_creator_builds_its_product(self, sink, creator_class, product_class):
        product = creator_class(sink).factory_method()

        assert isinstance(product, product_class)
        assert isinstance(product, Product)

    def test_create_object_and_use(self, sink):
        product = ConcreteCreatorB(sink).create_object_and_use()

        assert product.name == "ConcreteProductB"
        assert sink.lines == ["Using ConcreteProductB"]

    def test_creator_is_abstract(self):
        with pytest.raises(TypeError):
            Creator()


class TestAbstractFactory:
    def test_factory1_builds_family1(self, sink):
        factory = ConcreteFactory1(sink)

        assert isinstance(factory.create_product_x(), ProductX1)
        assert isinstance(factory.create_product_y(), ProductY1)

    def test_factory2_builds_family2(self, sink):
        factory = ConcreteFactory2(sink)

        assert isinstance(factory.create_product_x(), ProductX2)
        assert isinstance(factory.create_product_y(), ProductY2)

    def test_products_of_a_family_interact(self, sink):
        factory = ConcreteFactory2(sink)
        x = factory.create_product_x()
        y = factory.create_product_y()

        x.use()
        message = y.interact_with(x)

        assert message == "ProductY2 interacts with ProductX2"
        assert sink.lines == ["Using ProductX2", "ProductY2 interacts with ProductX2"]

    def test_abstract_factory_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            AbstractFactory()
