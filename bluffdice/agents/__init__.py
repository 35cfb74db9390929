"""
Registry of opponents that can sit at the table.
Agent classes register themselves with @register_agent("name"); the CLI and the simulation
script build them by name through create_agent.
"""

import importlib
import pkgutil

AGENT_MAP = {}


def register_agent(name):
	"""
	Class decorator adding an Agent subclass to AGENT_MAP under `name`.
	Raises:
		ValueError: If another class already holds that name.
	"""
	def decorator(cls):
		if name in AGENT_MAP and AGENT_MAP[name] is not cls:
			raise ValueError(f"agent name {name!r} already registered by {AGENT_MAP[name].__name__}")
		AGENT_MAP[name] = cls
		return cls
	return decorator


def create_agent(name, **kwargs):
	"""
	Build a registered agent by name.
	Args:
		name (str): Registry key, e.g. "computer" or "random".
		**kwargs: Passed to the agent constructor (rng, config, call_prob...).
	Raises:
		ValueError: If no agent is registered under `name`.
	"""
	try:
		cls = AGENT_MAP[name]
	except KeyError:
		raise ValueError(f"Unknown agent {name!r}. Supported: {sorted(AGENT_MAP)}") from None
	return cls(**kwargs)


# opponents live in sibling modules; importing them runs their decorators
for _info in pkgutil.iter_modules(__path__):
	if not _info.ispkg and _info.name != "base":
		importlib.import_module(f"{__name__}.{_info.name}")
