"""
Hamilton pipeline over the package's pure functions.

Modules:
- phenology: DAG nodes (hourly weather -> daily GDU -> cumulative -> stages)
- runner: driver construction and ``run_phenology``

Usage::

    from tidy_agronomy.flows import run_phenology

    results = run_phenology(hourly, crop="corn")
    results["stage_calendar"]

Adding a node
-------------
1. Add a public function to ``flows/phenology.py``. Name it after its output
   and name its parameters after the nodes (or driver inputs) it consumes.
2. Keep it a thin call into ``units``, ``accumulators``, ``weather`` or
   ``analysis``; the logic lives there and is tested there.
3. Request it by name via ``run_phenology(..., final_vars=[...])``.
"""

from tidy_agronomy.flows.runner import DEFAULT_OUTPUTS, build_driver, run_phenology

__all__ = ["DEFAULT_OUTPUTS", "build_driver", "run_phenology"]
