from .use_provider import use_provider, CLOUDFRONT_CERTIFICATE_REGION
