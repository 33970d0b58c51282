from typing import Optional

from pulumi import ComponentResource, Input, Output, ResourceOptions
from pulumi_aws import acm, route53
from pulumi_aws.acm import outputs as acm_outputs

from infra_edge.lib.utils import slug_from_domain


class DnsValidatedCertificate(ComponentResource):
    """
    An ACM certificate validated through Route 53 records.

    Pass ``provider`` in ``opts`` to choose the region the certificate is issued in, the validation records and the
    validation itself inherit it.
    """

    def __init__(
        self,
        name: str,
        domain_name: Input[str],
        zone_id: Input[str],
        alternative_names: Optional[Input[list[str]]] = None,
        tags: Optional[dict] = None,
        opts: ResourceOptions = None,
    ):
        super().__init__(
            f"pkg:edge:aws:{self.__class__.__name__.lower()}",
            name,
            None,
            opts,
        )

        self.certificate = acm.Certificate(
            f"{name}-certificate",
            domain_name=domain_name,
            subject_alternative_names=alternative_names,
            validation_method="DNS",
            tags=tags,
            opts=ResourceOptions(parent=self),
        )

        validation_records = self.certificate.domain_validation_options.apply(
            lambda options: self._create_validation_records(name, zone_id, options)
        )

        self.validation = acm.CertificateValidation(
            f"{name}-validation",
            certificate_arn=self.certificate.arn,
            validation_record_fqdns=validation_records.apply(
                lambda records: Output.all(*[record.fqdn for record in records])
            ),
            opts=ResourceOptions(parent=self),
        )

        # resolves once the certificate is issued
        self.certificate_arn: Output[str] = self.validation.certificate_arn

        self.register_outputs({"certificate_arn": self.certificate_arn})

    def _create_validation_records(
        self,
        name: str,
        zone_id: Input[str],
        options: Optional[list[acm_outputs.CertificateDomainValidationOption]],
    ) -> list[route53.Record]:
        """
        Creates one validation record per distinct record name.

        A wildcard and its apex (*.example.com, example.com) share the same validation record.
        """
        unique_options = {}
        for option in options or []:
            unique_options.setdefault(option.resource_record_name, option)

        return [
            route53.Record(
                f"{name}-validation-{slug_from_domain(option.domain_name)}",
                zone_id=zone_id,
                allow_overwrite=True,
                name=option.resource_record_name,
                records=[option.resource_record_value],
                ttl=60,
                type=option.resource_record_type,
                opts=ResourceOptions(parent=self),
            )
            for option in unique_options.values()
        ]
