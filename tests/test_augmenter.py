"""Tests for the augmenter module."""

from servicegen.augmenter import add_create_many, augment_methods
from servicegen.descriptors import MethodDescriptor, ModelDescriptor, Parameter

_ID = Parameter(name="id", source="path", required=True)
_DATA = Parameter(name="data", type="object", source="body")


def _model(methods, ctor_accepts=(_ID,)):
    return ModelDescriptor(
        name="Product", declared_name="product", methods=list(methods), ctor_accepts=ctor_accepts,
    )


def _create(**kwargs):
    return MethodDescriptor(name="create", model="Product", is_static=True, accepts=(_DATA,), **kwargs)


class TestCreateMany:

    def test_single_create_gets_clone(self):
        model = _model([_create(description="Create one.")])
        add_create_many(model)
        create, create_many = model.methods
        assert create_many.name == "createMany"
        assert create_many.returns_array is True
        assert create_many.accepts == create.accepts
        assert create_many.description == create.description
        assert create.returns_array is False

    def test_create_many_differs_only_in_name_and_arity(self):
        model = _model([_create()])
        augment_methods(model)
        create = model.find_methods("create")[0]
        create_many = model.find_methods("createMany")[0]
        assert create_many == create.derive(name="createMany", returns_array=True)

    def test_no_create(self):
        model = _model([MethodDescriptor(name="find", model="Product", is_static=True)])
        add_create_many(model)
        assert not model.find_methods("createMany")

    def test_two_creates_are_ambiguous(self):
        model = _model([_create(), _create()])
        add_create_many(model)
        assert len(model.methods) == 2
        assert not model.find_methods("createMany")


class TestConstructorParameters:

    def test_prepended_to_instance_methods(self):
        fk = Parameter(name="fk", source="path", required=True)
        method = MethodDescriptor(name="prototype.__findById__items", model="Product", accepts=(fk,))
        model = _model([method])
        augment_methods(model)
        assert [a.name for a in model.methods[0].accepts] == ["id", "fk"]

    def test_static_methods_untouched(self):
        model = _model([_create()])
        augment_methods(model)
        assert [a.name for a in model.methods[0].accepts] == ["data"]

    def test_no_ctor_parameter_list(self):
        method = MethodDescriptor(name="prototype.touch", model="Batch", accepts=(_DATA,))
        model = _model([method], ctor_accepts=None)
        augment_methods(model)
        assert model.methods[0].accepts == (_DATA,)

    def test_empty_ctor_parameter_list(self):
        method = MethodDescriptor(name="prototype.touch", model="Batch", accepts=(_DATA,))
        model = _model([method], ctor_accepts=())
        augment_methods(model)
        assert model.methods[0].accepts == (_DATA,)


class TestResourceParams:

    def test_path_params_other_than_id(self):
        fk = Parameter(name="fk", source="path")
        method = MethodDescriptor(name="prototype.__findById__items", model="Product", accepts=(fk,))
        model = _model([method])
        augment_methods(model)
        augmented = model.methods[0]
        assert augmented.resource_params == (fk,)
        assert augmented.has_resource_params

    def test_id_and_non_path_params_ignored(self):
        query = Parameter(name="filter", source="query")
        method = MethodDescriptor(name="prototype.__get__items", model="Product", accepts=(query,))
        model = _model([method])
        augment_methods(model)
        assert model.methods[0].resource_params == ()
        assert not model.methods[0].has_resource_params

    def test_static_method_path_params(self):
        stamp = Parameter(name="stamp", source="path")
        method = MethodDescriptor(name="touchAll", model="Product", is_static=True, accepts=(stamp,))
        model = _model([method])
        augment_methods(model)
        assert model.methods[0].resource_params == (stamp,)


class TestDescriptions:

    def test_list_descriptions_joined(self):
        method = MethodDescriptor(name="find", model="Product", is_static=True, description=["a", "b"])
        model = _model([method])
        augment_methods(model)
        assert model.methods[0].description == "a\nb"
