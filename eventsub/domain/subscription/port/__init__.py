from eventsub.domain.subscription.port.subscriber import Subscriber

__all__ = ["Subscriber"]
