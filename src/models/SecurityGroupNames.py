class SecurityGroupNames(object):
    """
    Ordered collection of security group names gathered from repeated
    --security-group-names flags
    """

    def __init__(self):
        self.names = []

    def append(self, value: str):
        self.names.append(value)

    def __iter__(self):
        return iter(self.names)

    def __len__(self):
        return len(self.names)

    def __str__(self):
        return ",".join(self.names)
