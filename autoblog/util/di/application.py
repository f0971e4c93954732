"""Application layer DI providers."""

from dishka import Scope, provide

from autoblog.application.usecase.admin import (
    GrantCreditsUseCase,
    ListProfilesUseCase,
    SetUnlimitedUseCase,
)
from autoblog.application.usecase.auth import (
    ExchangeCredentialUseCase,
    GetCurrentUserUseCase,
    NaverLoginUseCase,
    NaverSignupUseCase,
    ResolveSessionUseCase,
)
from autoblog.application.usecase.generation import GenerateBlogUseCase
from autoblog.application.usecase.message import (
    ListAllMessagesUseCase,
    ListMyMessagesUseCase,
    MarkMessageReadUseCase,
    ReplyMessageUseCase,
    SendMessageUseCase,
)
from autoblog.application.usecase.profile import (
    ClaimEmailRewardUseCase,
    GetProfileUseCase,
    SaveWritingStylesUseCase,
)
from autoblog.config import Settings
from autoblog.domain.service import (
    AuthService,
    CreditLedger,
    GenerationGuard,
    GenerationService,
    IdentityService,
    JWTService,
    MessageService,
    ProfileService,
)
from autoblog.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_naver_login_use_case(
        self,
        auth_service: AuthService,
        identity_service: IdentityService,
        profile_service: ProfileService,
        jwt_service: JWTService,
    ) -> NaverLoginUseCase:
        """Provide Naver login use case."""
        return NaverLoginUseCase(
            auth_service=auth_service,
            identity_service=identity_service,
            profile_service=profile_service,
            jwt_service=jwt_service,
        )

    @provide
    def get_naver_signup_use_case(
        self,
        auth_service: AuthService,
        identity_service: IdentityService,
        profile_service: ProfileService,
        jwt_service: JWTService,
        settings: Settings,
    ) -> NaverSignupUseCase:
        """Provide Naver signup use case."""
        return NaverSignupUseCase(
            auth_service=auth_service,
            identity_service=identity_service,
            profile_service=profile_service,
            jwt_service=jwt_service,
            settings=settings,
        )

    @provide
    def get_exchange_credential_use_case(
        self,
        jwt_service: JWTService,
        profile_service: ProfileService,
        settings: Settings,
    ) -> ExchangeCredentialUseCase:
        """Provide exchange credential use case."""
        return ExchangeCredentialUseCase(
            jwt_service=jwt_service, profile_service=profile_service, settings=settings
        )

    @provide
    def get_resolve_session_use_case(
        self, jwt_service: JWTService, settings: Settings
    ) -> ResolveSessionUseCase:
        """Provide resolve session use case."""
        return ResolveSessionUseCase(jwt_service=jwt_service, settings=settings)

    @provide
    def get_current_user_use_case(
        self, profile_service: ProfileService, identity_service: IdentityService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            profile_service=profile_service, identity_service=identity_service
        )

    # Generation use cases
    @provide
    def get_generate_blog_use_case(
        self,
        credit_ledger: CreditLedger,
        generation_service: GenerationService,
        generation_guard: GenerationGuard,
        profile_service: ProfileService,
        settings: Settings,
    ) -> GenerateBlogUseCase:
        """Provide generate blog use case."""
        return GenerateBlogUseCase(
            credit_ledger=credit_ledger,
            generation_service=generation_service,
            generation_guard=generation_guard,
            profile_service=profile_service,
            settings=settings,
        )

    # Profile use cases
    @provide
    def get_get_profile_use_case(self, profile_service: ProfileService) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(profile_service=profile_service)

    @provide
    def get_save_writing_styles_use_case(
        self, profile_service: ProfileService
    ) -> SaveWritingStylesUseCase:
        """Provide save writing styles use case."""
        return SaveWritingStylesUseCase(profile_service=profile_service)

    @provide
    def get_claim_email_reward_use_case(
        self,
        credit_ledger: CreditLedger,
        profile_service: ProfileService,
        settings: Settings,
    ) -> ClaimEmailRewardUseCase:
        """Provide claim email reward use case."""
        return ClaimEmailRewardUseCase(
            credit_ledger=credit_ledger,
            profile_service=profile_service,
            settings=settings,
        )

    # Admin use cases
    @provide
    def get_list_profiles_use_case(
        self, profile_service: ProfileService
    ) -> ListProfilesUseCase:
        """Provide list profiles use case."""
        return ListProfilesUseCase(profile_service=profile_service)

    @provide
    def get_grant_credits_use_case(self, credit_ledger: CreditLedger) -> GrantCreditsUseCase:
        """Provide grant credits use case."""
        return GrantCreditsUseCase(credit_ledger=credit_ledger)

    @provide
    def get_set_unlimited_use_case(self, credit_ledger: CreditLedger) -> SetUnlimitedUseCase:
        """Provide set unlimited use case."""
        return SetUnlimitedUseCase(credit_ledger=credit_ledger)

    # Message use cases
    @provide
    def get_send_message_use_case(
        self, message_service: MessageService
    ) -> SendMessageUseCase:
        """Provide send message use case."""
        return SendMessageUseCase(message_service=message_service)

    @provide
    def get_list_my_messages_use_case(
        self, message_service: MessageService
    ) -> ListMyMessagesUseCase:
        """Provide list own messages use case."""
        return ListMyMessagesUseCase(message_service=message_service)

    @provide
    def get_list_all_messages_use_case(
        self, message_service: MessageService
    ) -> ListAllMessagesUseCase:
        """Provide admin message list use case."""
        return ListAllMessagesUseCase(message_service=message_service)

    @provide
    def get_reply_message_use_case(
        self, message_service: MessageService
    ) -> ReplyMessageUseCase:
        """Provide reply message use case."""
        return ReplyMessageUseCase(message_service=message_service)

    @provide
    def get_mark_message_read_use_case(
        self, message_service: MessageService
    ) -> MarkMessageReadUseCase:
        """Provide mark message read use case."""
        return MarkMessageReadUseCase(message_service=message_service)
