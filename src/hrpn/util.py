from functools import wraps


class RPNError(Exception):
    '''
    Base of everything the calculator reports to its user.

    Subclasses carry the process exit code the command line uses for them.
    '''
    exit_code = 1


class ConfigError(RPNError):
    exit_code = 2


class LexError(RPNError):
    exit_code = 3


class MalformedLiteral(LexError):
    pass


class UnknownFunction(RPNError):
    exit_code = 4


class DivisionByZero(RPNError):
    exit_code = 5


class StackUnderflow(RPNError):
    exit_code = 6


class DomainError(RPNError):
    exit_code = 7


def wrap_user_errors(fmt, error=RPNError,
                     catch=(ValueError, OverflowError, ZeroDivisionError)):
    '''
    Decorator that converts Python math errors to calculator errors.

    Passes through RPNErrors. The message is formatted with the wrapped
    function's arguments.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except RPNError:
                raise
            except catch as e:
                raise error(fmt.format(*args, **kwargs), e) from e
        return wrapper
    return decorator
