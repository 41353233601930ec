from pytest import fixture

from hrpn.config import Config
from hrpn.machine import Machine


@fixture
def machine():
    return Machine()


@fixture
def evaluate(machine):
    '''
    Run a program on a fresh machine, returning the stack as floats.
    '''
    def run(program):
        return [float(z) for z in machine.evaluate(program)]
    return run


@fixture
def lenient():
    return Machine(Config(zero_fill=True))
