"""Static reference data for the forecaster.

Data that doesn't change with API calls: the taxon catalog and the
forecast window constants.

Adding a new module:
1. Create ``reference/{name}.py`` with constants/dataclasses
2. Re-export from this ``__init__.py``
"""

from nuptial_planner.reference.forecast import DEFAULT_FORECAST_DAYS as DEFAULT_FORECAST_DAYS
from nuptial_planner.reference.forecast import LOOKBACK_HOURS as LOOKBACK_HOURS
from nuptial_planner.reference.forecast import MAX_FORECAST_DAYS as MAX_FORECAST_DAYS
from nuptial_planner.reference.forecast import NO_RAIN_SENTINEL as NO_RAIN_SENTINEL
from nuptial_planner.reference.forecast import RAIN_THRESHOLD_MM as RAIN_THRESHOLD_MM
from nuptial_planner.reference.forecast import TOP_N_TAXA as TOP_N_TAXA
from nuptial_planner.reference.taxa import TAXON_CATALOG as TAXON_CATALOG
from nuptial_planner.reference.taxa import TaxonProfile as TaxonProfile
