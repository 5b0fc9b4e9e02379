"""
Business categories offered by the WhatsApp agent wizard.

Each entry is (id, display name, description, [(capability id, label, enabled by default), ...]).
"""

CATEGORY_TABLE = [
    ("healthcare", "Healthcare & Clinics", "Hospitals, clinics, dental offices, labs", [
        ("appointments", "Appointment Booking", True),
        ("reminders", "Appointment Reminders", True),
        ("prescriptions", "Prescription Refills", False),
        ("reports", "Report Collection", False),
        ("billing", "Billing Inquiries", True),
        ("insurance", "Insurance Queries", False),
        ("directions", "Location & Directions", True),
        ("doctors", "Doctor Information", True),
    ]),
    ("salon", "Salons & Spas", "Beauty salons, spas, barbershops", [
        ("appointments", "Appointment Booking", True),
        ("reminders", "Appointment Reminders", True),
        ("services", "Service Menu & Pricing", True),
        ("stylists", "Stylist Selection", True),
        ("offers", "Offers & Packages", True),
        ("feedback", "Feedback Collection", False),
        ("billing", "Payment & Billing", True),
    ]),
    ("restaurant", "Restaurants & Cafes", "Restaurants, cafes, cloud kitchens", [
        ("reservations", "Table Reservations", True),
        ("menu", "Menu & Pricing", True),
        ("orders", "Food Orders", True),
        ("delivery", "Delivery Tracking", True),
        ("offers", "Offers & Combos", True),
        ("feedback", "Feedback & Reviews", False),
        ("billing", "Bill Payment", True),
    ]),
    ("automotive", "Automotive Services", "Car service, workshops, dealerships", [
        ("appointments", "Service Booking", True),
        ("reminders", "Service Reminders", True),
        ("status", "Service Status", True),
        ("estimates", "Cost Estimates", True),
        ("pickup", "Pickup/Drop Scheduling", False),
        ("history", "Service History", False),
        ("billing", "Payment & Invoices", True),
    ]),
    ("education", "Education & Coaching", "Schools, coaching centers, tutors", [
        ("enrollment", "Course Enrollment", True),
        ("schedule", "Class Schedule", True),
        ("fees", "Fee Payment", True),
        ("reminders", "Class Reminders", True),
        ("attendance", "Attendance Tracking", False),
        ("progress", "Progress Reports", False),
        ("support", "Doubt Clearing", True),
    ]),
    ("realestate", "Real Estate", "Agents, property managers, builders", [
        ("listings", "Property Listings", True),
        ("viewings", "Schedule Viewings", True),
        ("inquiries", "Property Inquiries", True),
        ("pricing", "Pricing & EMI Info", True),
        ("documents", "Document Collection", False),
        ("updates", "Construction Updates", False),
    ]),
    ("professional", "Professional Services", "Lawyers, accountants, consultants", [
        ("appointments", "Consultation Booking", True),
        ("reminders", "Meeting Reminders", True),
        ("documents", "Document Requests", True),
        ("billing", "Invoice & Billing", True),
        ("status", "Case/Project Status", False),
        ("support", "General Queries", True),
    ]),
    ("retail", "Retail & E-Commerce", "Shops, stores, online sellers", [
        ("catalog", "Product Catalog", True),
        ("orders", "Order Placement", True),
        ("tracking", "Order Tracking", True),
        ("returns", "Returns & Exchanges", True),
        ("billing", "Payment & Invoices", True),
        ("support", "Product Support", True),
        ("offers", "Offers & Discounts", True),
    ]),
    ("general", "General Business", "Any other business type", [
        ("appointments", "Appointment Booking", True),
        ("reminders", "Reminders", True),
        ("inquiries", "General Inquiries", True),
        ("billing", "Billing & Payments", True),
        ("support", "Customer Support", True),
        ("feedback", "Feedback Collection", False),
    ]),
]
