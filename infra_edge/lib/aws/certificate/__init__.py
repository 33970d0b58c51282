from .dns_validated_certificate import DnsValidatedCertificate
