# This file is boilerplate. Copy it to any new sysenv you create.
# It calls the launcher that ships with `infra_edge`, which picks the module to run from the stack name,
# or from `edge:module` in the stack config when several stacks run the same module.
from infra_edge.launcher import run_active_stack

run_active_stack("aws")
