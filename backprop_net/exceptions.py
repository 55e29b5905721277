class NetworkError(Exception):
    """ Base class for errors raised by the network engine
    """


class InvalidShape(NetworkError, ValueError):
    """ Raised when a network shape has fewer than two layers or a layer
    with a non-positive number of nodes
    """


class InvalidInputIds(NetworkError, ValueError):
    """ Raised when the input ids don't match the input layer
    """


class InputSizeMismatch(NetworkError, ValueError):
    """ Raised when the number of inputs fed to the network differs from the
    number of input nodes
    """
