"""Build a model from a configuration file and summarize it."""

from pathlib import Path

from oceanus.cli import ScriptArgs
from oceanus.configs.core import Configuration
from oceanus.logging import getLogger, setup_root_logger
from oceanus.models.instantiation import instantiate_model

args = ScriptArgs.from_cli()

setup_root_logger(args.verbose)
logger = getLogger(__name__)

ROOT_PATH = Path(__file__).parent.parent
config = args.apply_overrides(
    Configuration.from_toml(ROOT_PATH.joinpath(args.config)),
)

model = instantiate_model(config)
model.update_hydrostatic_pressure()

logger.info("Model summary:\n%s", model)
p_hy_prime = model.pressures.p_hy_prime.interior
logger.info(
    "Hydrostatic pressure perturbation range: [%.3e, %.3e]",
    p_hy_prime.min().item(),
    p_hy_prime.max().item(),
)
