"""
sginterfaces

This project reports the Elastic Network Interfaces (ENIs) attached
to one or more AWS security groups, along with the instance each
interface is attached to and its status.
"""

import argparse
import logging
import sys

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from models import LookupResult
from models import NetworkInterface
from models import SecurityGroupNames

LOG_FORMAT = '%(asctime)s %(levelname)s %(message)s'
LOG_DATEFMT = '%m/%d/%Y %I:%M:%S %p'


class SecurityGroupNamesAction(argparse.Action):
    """Append each occurrence of the flag to a SecurityGroupNames"""

    def __call__(self, parser, namespace, values, option_string=None):
        getattr(namespace, self.dest).append(values)


def parse_arguments(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
             description="List the network interfaces attached to AWS security groups")  # noqa: E501
    parser.add_argument("--security-group-names",
                        action=SecurityGroupNamesAction,
                        default=SecurityGroupNames.SecurityGroupNames(),
                        metavar="NAME",
                        help="The names of the security groups to include in the output. May be repeated.")  # noqa: E501
    parser.add_argument("--region",
                        help="AWS region. Default is taken from the AWS environment.")  # noqa: E501
    parser.add_argument("--loglevel",
                        help="Set logging level")
    parser.add_argument("--logfile",
                        help="Write log messages to this file instead of stderr")  # noqa: E501
    parser.add_argument("--continue-on-error", action="store_const",
                        const=True, default=False,
                        help="Keep going with the remaining security groups after a failed lookup")  # noqa: E501
    parser.add_argument("--list-security-groups", action="store_const",
                        const=True, default=False,
                        help="Print the names of all security groups and exit")  # noqa: E501
    return parser.parse_args(argv)


def configure_logging(loglevel=None, filename=None):
    """
    Configure the root logger

    Inputs:
        loglevel = string, a logging level name such as "info"
        filename = string

    Returns:
        None
    """

    numeric_level = logging.WARNING
    if loglevel:
        numeric_level = getattr(logging, loglevel.upper(), None)
        if not isinstance(numeric_level, int):
            raise ValueError('Invalid log level: %s' % loglevel)
    if filename is not None:
        logging.basicConfig(filename=filename,
                            format=LOG_FORMAT,
                            datefmt=LOG_DATEFMT,
                            level=numeric_level)
    else:
        logging.basicConfig(stream=sys.stderr,
                            format=LOG_FORMAT,
                            datefmt=LOG_DATEFMT,
                            level=numeric_level)


def get_boto3_session(region=None) -> boto3.Session:
    """
    Return a boto3 session for the specified region. When region is None
    the region comes from the AWS environment.

    Inputs:
        region = string

    Returns:
        boto3 session
    """

    return boto3.session.Session(region_name=region)


def get_boto3_client(session: boto3.Session, service: str, region=None):
    """
    Return a boto3 client for the specified service in the specified region

    Inputs:
        session = boto3 session
        service = string
        region = string


    Returns:
        boto3 client object
    """

    boto3_client = session.client(service, region_name=region)
    return boto3_client


def get_security_group_names(region=None) -> list:
    """
    Returns the names of the security groups visible to the current
    credentials. Only the first page of results is read.

    Inputs:
        region = string

    Returns:
        list of string

    Raises:
        botocore.exceptions.BotoCoreError
        botocore.exceptions.ClientError
    """

    boto3_session = get_boto3_session(region)
    ec2_client = get_boto3_client(boto3_session, "ec2", region)
    response = ec2_client.describe_security_groups()
    if response.get("NextToken") is not None:
        logging.warning("More security groups are available than were returned; only the first page is listed.")  # noqa: E501
    security_group_names = []
    for security_group in response.get("SecurityGroups", []):
        security_group_names.append(security_group.get("GroupName"))
    return security_group_names


def get_network_interfaces_for_security_group(security_group_name: str,
                                              region=None) -> LookupResult.LookupResult:  # noqa: E501
    """
    Returns the network interfaces that belong to a security group.
    Only the first page of results is read.

    Inputs:
        security_group_name = string
        region = string

    Returns:
        LookupResult, with network_interfaces in the order the API
        returned them, or with error set when the lookup failed
    """

    result = LookupResult.LookupResult(security_group_name)
    try:
        boto3_session = get_boto3_session(region)
        ec2_client = get_boto3_client(boto3_session, "ec2", region)
        response = ec2_client.describe_network_interfaces(
            Filters=[
                {
                    "Name": "group-name",
                    "Values": [
                        security_group_name
                    ]
                }
            ]
        )
    except (BotoCoreError, ClientError) as e:
        logging.error("Unable to describe network interfaces for security group %s: %s",  # noqa: E501
                      security_group_name, e)
        result.error = e
        return result

    if response.get("NextToken") is not None:
        result.truncated = True
        logging.warning("Security group %s has more network interfaces than were returned; only the first page is shown.",  # noqa: E501
                        security_group_name)
    for network_interface in response.get("NetworkInterfaces", []):
        result.network_interfaces.append(
            NetworkInterface.NetworkInterface.from_response(network_interface))
    logging.info("Found %d network interfaces for security group %s",
                 len(result.network_interfaces), security_group_name)
    return result


def output_console(security_group_name: str, network_interfaces: list):
    """
    Displays the network interfaces of a security group on the console

    Inputs:
        security_group_name = string
        network_interfaces = list of NetworkInterface

    Returns:
        None
    """

    print("Security group name: {}".format(security_group_name))
    print("Network interfaces:")
    for nic in network_interfaces:
        print("  NetworkInterface ID: {}".format(nic.id))
        if nic.instance_id is not None:
            print("  InstanceId: {}".format(nic.instance_id))
        print("  Status: {}".format(nic.status))
        print()


def main(argv=None):
    """
    Main entry point
    """
    args = parse_arguments(argv)
    configure_logging(vars(args).get("loglevel"), vars(args).get("logfile"))
    region = vars(args).get("region")

    if vars(args).get("list_security_groups"):
        try:
            security_group_names = get_security_group_names(region)
        except (BotoCoreError, ClientError) as e:
            logging.error("Unable to describe security groups: %s", e)
            sys.exit(1)
        for security_group_name in security_group_names:
            print(security_group_name)
        return

    logging.info("Looking up network interfaces for security groups: %s",
                 args.security_group_names)
    failed = []
    for security_group_name in args.security_group_names:
        result = get_network_interfaces_for_security_group(
                    security_group_name, region)
        if not result.ok:
            failed.append(security_group_name)
            if not args.continue_on_error:
                sys.exit(1)
            continue
        output_console(security_group_name, result.network_interfaces)
    if len(failed) > 0:
        logging.error("Lookups failed for security groups: %s",
                      ",".join(failed))
        sys.exit(1)
    return


if __name__ == "__main__":
    main()
