from .error_msgs import INVALID_DECORATOR_OPERATION, DUPLICATED_METADATA


class TaggingException(Exception):
    pass


class InvalidDecoratorOperation(TaggingException):

    def __init__(self, message: str = INVALID_DECORATOR_OPERATION):
        super(InvalidDecoratorOperation, self).__init__(message)


class DuplicatedMetadata(TaggingException):

    def __init__(self, key):
        self._key = key
        super(DuplicatedMetadata, self).__init__(f'{DUPLICATED_METADATA} {key}')

    @property
    def key(self):
        return self._key
