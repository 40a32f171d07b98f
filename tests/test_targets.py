import pytest

from tagdi.core import InvalidDecoratorOperation
from tagdi.targets import (classify, ensure_parameter_target, ensure_property_target,
                           ParameterSlot, PropertySlot, ClassSlot)


class Ninja:

    def __init__(self, katana, shuriken):
        self.katana = katana
        self.shuriken = shuriken

    @property
    def weapon(self):
        return self.katana


def test_classify_parameter():
    slot = classify(Ninja, None, 1)
    assert isinstance(slot, ParameterSlot)
    assert slot.target is Ninja
    assert slot.index == 1
    assert slot.key == '1'
    assert slot.property_key is None
    assert str(slot) == 'Ninja.__init__[1]'


@pytest.mark.parametrize('target, descriptor', [
    pytest.param(Ninja, None, id='class'),
    pytest.param(Ninja, Ninja.__dict__['weapon'], id='descriptor'),
    pytest.param(Ninja(1, 2), None, id='instance'),
])
def test_classify_property(target, descriptor):
    slot = classify(target, 'weapon', descriptor)
    assert isinstance(slot, PropertySlot)
    assert slot.name == 'weapon'
    assert slot.key == 'weapon'
    assert str(slot) == 'Ninja.weapon'


def test_classify_class():
    slot = classify(Ninja)
    assert isinstance(slot, ClassSlot)
    assert slot.key is None
    assert str(slot) == 'Ninja'


@pytest.mark.parametrize('target, key, index', [
    pytest.param(Ninja, None, -1, id='negative-index'),
    pytest.param(Ninja, None, 1.0, id='float-index'),
    pytest.param(Ninja, None, True, id='bool-index'),
    pytest.param(Ninja, 0, None, id='int-key'),
    pytest.param(Ninja, object(), None, id='object-key'),
    pytest.param(Ninja(1, 2), None, 0, id='instance-parameter'),
    pytest.param(Ninja(1, 2), None, None, id='instance-without-key'),
    pytest.param(Ninja, None, property(), id='descriptor-without-key'),
])
def test_classify_invalid(target, key, index):
    with pytest.raises(InvalidDecoratorOperation):
        classify(target, key, index)


def test_ensure_parameter_target():
    assert ensure_parameter_target(classify(Ninja, None, 0)) is Ninja

    with pytest.raises(InvalidDecoratorOperation):
        ensure_parameter_target(classify(Ninja, 'katana', 0))
    with pytest.raises(InvalidDecoratorOperation):
        ensure_parameter_target(classify(Ninja, 'katana'))


def test_ensure_property_target():
    assert ensure_property_target(classify(Ninja, 'weapon')) is Ninja
    assert ensure_property_target(classify(Ninja(1, 2), 'weapon')) is Ninja

    with pytest.raises(InvalidDecoratorOperation):
        ensure_property_target(classify(Ninja))
    with pytest.raises(InvalidDecoratorOperation):
        ensure_property_target(classify(Ninja, None, 0))
