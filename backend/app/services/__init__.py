"""
Services module - Application business logic layer.

Modules:
- analytics: Pure workout history statistics
- workouts: Workout log persistence and analytics orchestration
- subscriptions: Paywall state
- external: Auth provider, LiveKit and payment provider integrations
"""
