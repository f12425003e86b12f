"""Recommendation engine — schema-constrained telecom plan recommendations.

Modules:
    config            LLM parameters and recommendation limits
    request_builder   Profile + providers → instruction text and output schema
    client            Single LLM call, shape validation, failure classification
    errors            Failure taxonomy surfaced to the session

Pipeline:
    build_request → LLMClient.complete → RecommendationClient._parse → list[Plan]
"""
