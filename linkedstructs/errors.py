class ContainerFullError(Exception):
    pass


class ContainerEmptyError(Exception):
    pass