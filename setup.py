from setuptools import setup, find_packages

setup(
    name="flashcards",
    version="0.1.0",
    packages=find_packages(),
    py_modules=["manage"],
    description="Flashcard bundles and cards on the Django ORM, with a REST API and management commands",
    extras_require={
        "dev": [
            "Werkzeug",
            "pipdeptree",
            "django_extensions",
        ],
        "test": [
            "factory_boy==3.3.1",
            "mockito==1.5.1",
            "pytest",
            "pytest-django",
        ],
    },
    install_requires=[
        "Django==4.2.16",
        "django-environ==0.11.2",
        "django-cors-headers==4.4.0",
        "djangorestframework==3.15.2",
        "drf-nested-routers==0.94.1",
    ],
)
