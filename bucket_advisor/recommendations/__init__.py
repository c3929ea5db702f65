"""
Recommendation engine: ranks the investment bucket catalog for one user
profile with rule-based scores and human-readable explanations.

Modules
-------
rules      : RuleOutcome dataclass + the seven scoring rule groups
             + SCORING_RULES - pure functions, no I/O.
scorer     : ScoredBucket dataclass + score_bucket() + determine_fit_level()
             + build_why_this_fits_you().
ranker     : score_catalog() + rank() + top_n() + sort_recommendations().
projection : parse_expected_return_pct() + project_future_value() + milestone_for().
reporter   : serialize_scored_bucket() + write_recommendation_json()
             + write_recommendation_csv() - file output.
"""
