import argparse
import asyncio

from api.auth import HttpSignupService
from config.settings import SignupConfig
from observability.logging import setup_logging
from signup.flow import SignupFlow
from signup.session import AuthStore, HistoryRouter


async def run(image_path=None):
    config = SignupConfig.from_env()
    setup_logging(level=config.log_level, format=config.log_format)

    patches = [
        {"email": "traveler@", "phoneNumber": "010-1234", "nickname": "여행자"},
        {"email": "traveler@gmail.com", "phoneNumber": "010-1234-5678"},
        {"password": "trip2024!", "confirmPassword": "trip2024!"},
    ]

    auth = AuthStore()
    router = HistoryRouter()

    async with HttpSignupService.from_config(config) as service:
        flow = SignupFlow(service, auth, router, config)

        if image_path:
            await flow.select_image(image_path, "image/jpeg")

        # first attempt with a partial form surfaces every error at once
        for i, patch in enumerate(patches, 1):
            for name, value in patch.items():
                flow.change(name, value)
            if i == 1:
                await flow.submit()
            print(f"\nPATCH #{i}")
            print("errors:", flow.errors)

        result = await flow.submit()

    print("\nresult:", result)
    print("status:", flow.status.value)
    print("route:", router.current)
    print("authenticated:", auth.is_authenticated)
    auth.clear()


def main():
    parser = argparse.ArgumentParser(description="Run the sign-up pipeline against a registration API")
    parser.add_argument("--image", help="profile image to attach")
    args = parser.parse_args()
    asyncio.run(run(args.image))


if __name__ == "__main__":
    main()
