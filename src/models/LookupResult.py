class LookupResult(object):
    """
    Outcome of a network interface lookup for one security group.
    error holds the exception raised by boto3, if any.
    """

    def __init__(self, security_group_name: str):
        self.security_group_name = security_group_name
        self.network_interfaces = []
        self.error = None
        self.truncated = False

    @property
    def ok(self) -> bool:
        return self.error is None
