from .counts import annual_count_summary, counts_by_year, missing_years, plot_counts_by_year
from .weights import compare_weights_by_sex, plot_weight_by_sex_site, weight_by_sex, weight_by_sex_and_site
from .hindfoot import hindfoot_regression, plot_weight_vs_hindfoot

__all__ = [
    "annual_count_summary",
    "counts_by_year",
    "missing_years",
    "plot_counts_by_year",
    "compare_weights_by_sex",
    "plot_weight_by_sex_site",
    "weight_by_sex",
    "weight_by_sex_and_site",
    "hindfoot_regression",
    "plot_weight_vs_hindfoot",
]
