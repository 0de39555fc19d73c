"""Prompt builders for diet plans and food analysis."""

from diet_genius.domain.profile import UserProfile

FOOD_ANALYSIS_PROMPT = (
    "Analyze the food in this image. Identify what it is and provide its "
    "estimated nutritional information: calories, protein, carbs, and fats. "
    "Also provide a brief description and a health score from 1 to 10 "
    "(1 being least healthy, 10 being most healthy)."
)


def build_diet_plan_prompt(profile: UserProfile) -> str:
    """Render the diet-plan instruction with the profile values inlined."""
    return (
        "Create a personalized one-day diet plan based on the following user data:\n"
        f"- Height: {profile.height} cm\n"
        f"- Weight: {profile.weight} kg\n"
        f"- Age: {profile.age} years\n"
        f"- Gender: {profile.gender}\n"
        f"- Activity Level: {profile.activity_level}\n"
        f"- Goal: {profile.goal} weight\n"
        "\n"
        "Provide a balanced diet plan with a breakfast, lunch, dinner, "
        "and one snack.\n"
        "For each meal, give a detailed description and estimate the "
        "nutritional information (calories, protein, carbs, fats).\n"
        "Also, provide the total daily calorie and macro goals."
    )
