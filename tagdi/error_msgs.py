INVALID_DECORATOR_OPERATION: str = 'Tagged decorators must be applied to the parameters of a class constructor ' \
                                   'or to a class property.'
DUPLICATED_METADATA: str = 'Metadata key was used more than once in a parameter:'
