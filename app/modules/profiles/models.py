# Supabase tables: user_profile, user_role
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

user_profile:
- id: uuid (primary key, default gen_random_uuid())
- user_id: uuid (unique, not null, references auth.users.id)
- current_mood: text (nullable) - happy | calm | energetic | anxious | tired
- full_name: text (nullable)
- nickname: text (nullable)
- age_range: text (nullable) - 18 | 18-25 | 26-35 | 36-45 | 46+
- gender: text (nullable)
- current_step: int (nullable) - highest onboarding step reached, 10 when complete
- is_onboarding_complete: bool (default false)
- preferred_language: text (nullable) - en | fil | es
- height: numeric (nullable) - always centimeters
- weight: numeric (nullable) - always kilograms
- height_unit: text (nullable) - unit the user picked (cm | ft)
- weight_unit: text (nullable) - unit the user picked (kg | lb)
- country: text (nullable)
- region_province: text (nullable)
- fitness_goal, fitness_level, workout_location: text (nullable)
- equipment_list: text[] (nullable)
- workout_duration_minutes: int (nullable)
- weekly_frequency: text[] (nullable) - weekday codes
- target_muscle_groups: text[] (nullable)
- dietary_preference: text (nullable)
- meal_plan_duration: text[] (nullable) - weekday codes
- health_conditions: text[] (nullable)
- biometrics_enabled: bool (nullable)
- weekly_budget: numeric (nullable)
- weekly_budget_currency: text (nullable)
- plan_code: text (nullable, references plans.code)
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)

user_role:
- user_id: uuid (unique, not null, references auth.users.id)
- role: text (not null) - e.g. "member"

Writes are last-write-wins upserts on user_id.
"""
