"""Pulumi mocks recording the resources and invokes of a program."""

import re

import pulumi

DISTRIBUTION = "aws:cloudfront/distribution:Distribution"
CERTIFICATE = "aws:acm/certificate:Certificate"
CERTIFICATE_VALIDATION = "aws:acm/certificateValidation:CertificateValidation"
RECORD = "aws:route53/record:Record"
FUNCTION = "aws:cloudfront/function:Function"
AWS_PROVIDER = "pulumi:providers:aws"
HTTPS_REDIRECT = "pkg:edge:aws:httpsredirect"
GET_ZONE = "aws:route53/getZone:getZone"

CLOUDFRONT_ZONE_ID = "Z2FDTNDATAQYW2"


class EdgeMocks(pulumi.runtime.Mocks):
    """Records every resource and invoke, and fills in the outputs the components read."""

    def __init__(self):
        self.resources: list[pulumi.runtime.MockResourceArgs] = []
        self.calls: list[pulumi.runtime.MockCallArgs] = []

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        self.resources.append(args)
        outputs = dict(args.inputs)

        if args.typ == DISTRIBUTION:
            outputs["domainName"] = f"{args.name}.cloudfront.net"
            outputs["hostedZoneId"] = CLOUDFRONT_ZONE_ID
            outputs["arn"] = f"arn:aws:cloudfront::123456789012:distribution/{args.name}"
        elif args.typ == CERTIFICATE:
            names = [args.inputs["domainName"], *args.inputs.get("subjectAlternativeNames", [])]
            outputs["arn"] = f"arn:aws:acm:us-east-1:123456789012:certificate/{args.name}"
            # ACM validates a wildcard with the record of its apex
            outputs["domainValidationOptions"] = [
                {
                    "domainName": name,
                    "resourceRecordName": f"_acme.{name.removeprefix('*.')}.",
                    "resourceRecordType": "CNAME",
                    "resourceRecordValue": f"_token.{name.removeprefix('*.')}.acm-validations.aws.",
                }
                for name in names
            ]
        elif args.typ == CERTIFICATE_VALIDATION:
            outputs["certificateArn"] = args.inputs["certificateArn"]
        elif args.typ == RECORD:
            outputs["fqdn"] = args.inputs["name"]
        elif args.typ == FUNCTION:
            outputs["arn"] = f"arn:aws:cloudfront::123456789012:function/{args.name}"

        return f"{args.name}-id", outputs

    def call(self, args: pulumi.runtime.MockCallArgs):
        self.calls.append(args)

        if args.token == GET_ZONE:
            return {"id": f"zone-{args.args['name']}", "zoneId": f"zone-{args.args['name']}", "name": args.args["name"]}

        return {}

    def of_type(self, typ: str) -> list[pulumi.runtime.MockResourceArgs]:
        return [resource for resource in self.resources if resource.typ == typ]

    def named(self, name: str) -> pulumi.runtime.MockResourceArgs:
        [resource] = [resource for resource in self.resources if resource.name == name]
        return resource

    def calls_to(self, token: str) -> list[pulumi.runtime.MockCallArgs]:
        return [call for call in self.calls if call.token == token]

    def alias_records(self, prefix: str) -> list[pulumi.runtime.MockResourceArgs]:
        """Alias records whose resource name starts with ``{prefix}-a-record-`` or ``{prefix}-aaaa-record-``"""
        pattern = re.compile(rf"^{re.escape(prefix)}-(a|aaaa)-record-")
        return [record for record in self.of_type(RECORD) if pattern.match(record.name)]
