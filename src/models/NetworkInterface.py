class NetworkInterface(object):
    def __init__(self, id=None):
        self.security_groups = {}
        self.description = None
        self.instance_id = None
        self.status = None
        self.id = id

    @classmethod
    def from_response(cls, network_interface: dict):
        """
        Copy the fields we report on out of a DescribeNetworkInterfaces
        record

        Inputs:
            network_interface = dict

        Returns:
            NetworkInterface
        """
        nic = cls(id=network_interface.get("NetworkInterfaceId"))
        nic.description = network_interface.get("Description")
        nic.status = network_interface.get("Status")
        attachment = network_interface.get("Attachment")
        if attachment is not None:
            nic.instance_id = attachment.get("InstanceId")
        for group in network_interface.get("Groups", []):
            nic.security_groups[group.get("GroupId")] = group.get("GroupName")
        return nic
