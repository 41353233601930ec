from collections import deque

from .number import ZERO
from .util import StackUnderflow


class Stack:
    '''
    Last-in first-out sequence of numbers.

    :param zero_fill: Popping past the bottom yields ZERO instead of raising
                      StackUnderflow.
    '''

    def __init__(self, values=(), zero_fill=False):
        self._items = deque(values)
        self.zero_fill = zero_fill

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        '''
        Iterate bottom of the stack first.
        '''
        return iter(self._items)

    def __repr__(self):
        return '{}({!r}, zero_fill={!r})'.format(type(self).__name__,
                                                 list(self._items),
                                                 self.zero_fill)

    def push(self, *values):
        '''
        Push all values onto the stack, leftmost at the bottom.
        '''
        self._items.extend(values)

    def pop(self, n=1):
        '''
        Pop n values, topmost first.

        Raises StackUnderflow, leaving the stack as it was, if fewer than n
        values are on it, unless zero filling.
        '''
        if len(self._items) < n and not self.zero_fill:
            raise StackUnderflow(
                'Less than {} element(s) on stack'.format(n))
        return [self._items.pop() if self._items else ZERO
                for _ in range(n)]

    def peek(self):
        '''
        Return the top of the stack without popping it.
        '''
        if self._items:
            return self._items[-1]
        if self.zero_fill:
            return ZERO
        raise StackUnderflow('Empty stack')

    def clear(self):
        self._items.clear()
