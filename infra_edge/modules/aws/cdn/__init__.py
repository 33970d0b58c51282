from .cdn import ContentDelivery
