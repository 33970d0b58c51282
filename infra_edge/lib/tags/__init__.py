from ..config import (
    tag_prefix,
    get_team,
    get_sysenv,
    get_stack,
    get_project,
    get_purpose,
    get_phase,
)


def get_tags(service, role, group=None) -> dict:
    """
    Generate tag dict for resources

    example tags:
      cdn distribution for the `site` stack:
        Name = site-distribution
        edge:sysenv = ex-aws-us-east-1-sandbox-dev
        edge:service = site
        edge:role = distribution
        edge:group = main
        edge:createdby = pulumi
        edge:team = web
        edge:project = edge
        edge:stack = site
        edge:purpose = sandbox
        edge:phase = dev

      certificate for the same distribution:
        Name = site-certificate-example-com
        edge:service = site
        edge:role = certificate
        edge:group = example-com
        ...

    :param service: This resource's "namespace" (site, docs, redirect,...)
    :param role: The role this resource performs within the namespace (distribution, certificate,...)
    :param group: The group this resource belongs to (example-com). Leave unset to use "main".
    :return: Dict of tags
    """

    group_name = "main" if not group else group
    group_suffix = f"-{group}" if group else ""

    return {
        "Name": f"{service}-{role}{group_suffix}",
        f"{tag_prefix}sysenv": get_sysenv(),
        f"{tag_prefix}service": service,
        f"{tag_prefix}role": role,
        f"{tag_prefix}group": group_name,
        f"{tag_prefix}team": get_team(),
        f"{tag_prefix}createdby": "pulumi",
        f"{tag_prefix}stack": get_stack(),
        f"{tag_prefix}project": get_project(),
        f"{tag_prefix}purpose": get_purpose(),
        f"{tag_prefix}phase": get_phase(),
    }
