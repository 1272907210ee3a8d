"""
User-owned copies of the workout catalogue:

user_workout_plans
- same columns as workout_plans
- user_id: uuid (references auth.users)

user_workout_plan_tags
- user_plan_id -> user_workout_plans.id, tag_id -> workout_tags.id

user_workout_plan_exercises / user_workout_plan_exercises_details
- same shape as the catalogue tables; details also carry a section
"""
