# learnnet/utils/errors.py
class NetworkError(RuntimeError):
    """
    Base class for learning-network structural errors.
    """


class MalformedBlueprintError(NetworkError, TypeError):
    """
    Raised when a Node was expected (blueprint, tree record) but something
    else was given. Fatal, raised at composition time.
    """


class NotTrainedError(NetworkError):
    """
    Raised when a node queries a machine that has never been trained.
    """
