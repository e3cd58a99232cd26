"""
Default site content.

Everything an editor can change in the admin back-office starts from this
document. Edits are stored as overrides and merged on top of it, so keys added
here show up on the site even for installs that already have an override file.
"""

_GRADIENT_DARK = {
    "startColor": "#1e293b",
    "middleColor": "#334155",
    "endColor": "#0f172a",
    "direction": "to-br",
    "textColors": {"primary": "#ffffff", "secondary": "#e2e8f0", "tertiary": "#94a3b8"},
}


def _category_page(title, subtitle, image, features, tiers):
    return {
        "hero": {
            "image": image,
            "title": title,
            "subtitle": subtitle,
            "ctaText": "Book Your Session",
            "ctaLink": "/contact",
        },
        "serviceOverview": {
            "title": f"About Our {title}",
            "description": subtitle,
            "features": features,
            "gradients": dict(_GRADIENT_DARK),
        },
        "packages": {
            "title": "Packages",
            "description": "Transparent pricing, tailored to your day.",
            "tiers": tiers,
            "gradients": dict(_GRADIENT_DARK),
        },
        "recentWork": {
            "title": "Recent Work",
            "description": "A selection from our latest galleries.",
            "images": [],
            "gradients": dict(_GRADIENT_DARK),
        },
    }


def _tiers(essential, premium, luxury):
    return [
        {"id": "essential", "name": "Essential", "price": essential, "duration": "2 hours",
         "features": ["50 edited photos", "Online gallery", "Print release"]},
        {"id": "premium", "name": "Premium", "price": premium, "duration": "6 hours",
         "features": ["150 edited photos", "Online gallery", "Print release", "USB drive"],
         "isPopular": True},
        {"id": "luxury", "name": "Luxury", "price": luxury, "duration": "Full day",
         "features": ["300+ edited photos", "Online gallery", "Print release", "USB drive", "Photo album"]},
    ]


DEFAULT_SITE_CONFIG = {
    "contact": {
        "business": {
            "name": "Studio Photography",
            "tagline": "Professional Photography & Videography",
            "phone": "+27 12 345 6789",
            "email": "info@example.com",
            "whatsapp": "+27 12 345 6789",
            "bookingEmail": "bookings@example.com",
            "address": {
                "street": "Cape Town, South Africa",
                "city": "Cape Town",
                "province": "Western Cape",
                "postal": "8001",
                "country": "South Africa",
                "displayText": "Cape Town, South Africa",
            },
        },
        "methods": [
            {"type": "phone", "title": "Call Us", "icon": "Phone",
             "details": ["+27 12 345 6789", "Available Mon-Fri 9AM-6PM"],
             "action": "tel:+27123456789", "priority": 1},
            {"type": "email", "title": "Email Us", "icon": "Mail",
             "details": ["info@example.com", "We respond within 24 hours"],
             "action": "mailto:info@example.com", "priority": 2},
            {"type": "whatsapp", "title": "WhatsApp", "icon": "MessageCircle",
             "details": ["+27 12 345 6789", "Quick responses during business hours"],
             "action": "https://wa.me/27123456789", "priority": 3},
            {"type": "location", "title": "Visit Us", "icon": "MapPin",
             "details": ["Cape Town, South Africa", "By appointment only"],
             "action": None, "priority": 4},
        ],
        "hours": {
            "weekdaysDisplay": "Monday - Friday",
            "weekdaysTime": "9:00 AM - 6:00 PM",
            "saturdayDisplay": "Saturday",
            "saturdayTime": "10:00 AM - 4:00 PM",
            "sundayDisplay": "Sunday",
            "sundayTime": "By appointment",
            "note": "Evening and weekend shoots available by arrangement.",
        },
        "responseTimes": {
            "email": {"title": "Email Inquiries", "time": "Within 24 hours",
                      "description": "Detailed responses to all project inquiries"},
            "whatsapp": {"title": "WhatsApp Messages", "time": "Within 2 hours",
                         "description": "Quick questions and availability checks"},
            "phone": {"title": "Phone Calls", "time": "Immediate",
                      "description": "Direct line during business hours"},
        },
        "serviceAreas": {
            "primary": {"title": "Primary Area:", "area": "Cape Town Metro (no travel fees)"},
            "extended": {"title": "Extended Area:", "area": "Western Cape Province"},
            "destination": {"title": "Destination:", "area": "Anywhere in South Africa & beyond"},
            "note": "Travel costs calculated based on distance and duration.",
        },
    },
    "home": {
        "hero": {
            "slides": [
                {"id": "slide-1", "image": "/images/hero/homepage-main-hero.jpg",
                 "title": "Capturing Life's Beautiful Moments",
                 "subtitle": "Professional Photography & Videography",
                 "cta": "Book Your Session",
                 "gradient": ["rgba(0,0,0,0.7)", "rgba(0,0,0,0.3)"]},
                {"id": "slide-2", "image": "/images/hero/wedding-photography-hero.jpg",
                 "title": "Your Love Story Awaits",
                 "subtitle": "Wedding Photography Specialists",
                 "cta": "View Wedding Gallery",
                 "gradient": ["rgba(139,69,19,0.6)", "rgba(255,20,147,0.4)"]},
                {"id": "slide-3", "image": "/images/hero/portrait-photography-hero.jpg",
                 "title": "Professional Portraits",
                 "subtitle": "Corporate & Lifestyle Photography",
                 "cta": "Book Portrait Session",
                 "gradient": ["rgba(25,25,112,0.6)", "rgba(0,191,255,0.4)"]},
            ],
            "autoAdvance": True,
            "interval": 6000,
            "effects": ["liquid_dissolve"],
        },
        "servicesOverview": {
            "headline": "Capturing Life's Beautiful Moments",
            "description": "From intimate portraits to grand celebrations, we capture every moment.",
            "photography": {
                "title": "Photography",
                "image": "/images/services/photography-service-showcase.jpg",
                "services": ["Weddings", "Portraits", "Corporate", "Events", "Products", "Graduation"],
                "ctaText": "Explore Photography",
            },
            "videography": {
                "title": "Videography",
                "image": "/images/services/videography-service-showcase.jpg",
                "services": ["Wedding Films", "Corporate Videos", "Events", "Product Videos", "Social Media"],
                "ctaText": "Explore Videography",
            },
        },
        "testimonials": {
            "headline": "What Our Clients Say",
            "items": [
                {"id": 1, "name": "Sarah Mitchell", "role": "Wedding Client",
                 "image": "/images/testimonials/client-1.jpg",
                 "quote": "They made our wedding day absolutely magical.", "rating": 5},
                {"id": 2, "name": "Michael Thompson", "role": "Corporate Client",
                 "image": "/images/testimonials/client-2.jpg",
                 "quote": "Professional, creative, and incredibly talented.", "rating": 5},
            ],
        },
    },
    "portfolio": {
        "featured": {
            "imageCount": 9,
            "borderThickness": 0,
            "borderRadius": 8,
            "borderColor": "#ffffff",
            "borderColorEnd": "#cccccc",
            "imagePadding": 2,
            "layoutStyle": "square",
            "backgroundGradientStart": "#1e293b",
            "backgroundGradientMiddle": "#334155",
            "backgroundGradientEnd": "#0f172a",
            "textColor": "#e2e8f0",
        },
    },
    "categoryPages": {
        "photography": {
            "weddings": _category_page(
                "Wedding Photography", "Your love story, told beautifully.",
                "/images/categories/weddings-hero.jpg",
                ["Full day coverage", "Second shooter", "Engagement session"],
                _tiers("R 8,500", "R 15,500", "R 25,000"),
            ),
            "portraits": _category_page(
                "Portrait Photography", "Portraits with personality.",
                "/images/categories/portraits-hero.jpg",
                ["Studio or location", "Professional retouching", "Wardrobe guidance"],
                _tiers("R 1,500", "R 3,500", "R 5,500"),
            ),
            "corporate": _category_page(
                "Corporate Photography", "Headshots and events that elevate your brand.",
                "/images/categories/corporate-hero.jpg",
                ["Team headshots", "Event coverage", "Brand imagery"],
                _tiers("R 3,000", "R 7,500", "R 12,000"),
            ),
        },
        "videography": {
            "weddings": _category_page(
                "Wedding Films", "Cinematic films of your day.",
                "/images/categories/wedding-films-hero.jpg",
                ["Highlight film", "Drone footage", "Full ceremony edit"],
                _tiers("R 12,000", "R 20,000", "R 32,000"),
            ),
            "corporate": _category_page(
                "Corporate Video", "Stories that move your audience.",
                "/images/categories/corporate-video-hero.jpg",
                ["Scripting support", "Interviews", "Social cut-downs"],
                _tiers("R 9,000", "R 18,000", "R 30,000"),
            ),
        },
    },
}
