"""
Read-only workout catalogue tables:

workout_plans
- id: uuid (primary key)
- name: text
- description, motivation: text (nullable)
- level: text (beginner | intermediate | advanced)
- total_minutes, total_calories, duration_days, total_exercises: int (nullable)
- is_free: bool
- image_path, image_alt: text (nullable)
- tier_code, category: text (nullable)
- created_at: timestamp

workout_tags
- id: uuid, name: text

workout_plan_tags
- plan_id -> workout_plans.id, tag_id -> workout_tags.id

workout_plan_exercises
- plan_id -> workout_plans.id
- exercise_id -> workout_plan_exercises_details.id
- position: int, section: text
- safety_tip: text (nullable)
- sets, reps, duration_seconds: int (nullable)
- rest_seconds: int, per_side: bool

workout_plan_exercises_details
- id: uuid, name: text
- default_safety_tip, primary_muscle, image_path, image_alt, image_slug: text (nullable)
- created_at: timestamp
"""
