#!/usr/bin/env python3

import aws_cdk as cdk

from tour_booking_stack import TourBookingStack

app = cdk.App()
TourBookingStack(
    app,
    "TourBookingStack",
)

app.synth()
