"""
Fixed layouts for every document template.

Each layout line may contain ``{fieldName}`` slots. A field has one placeholder
per template, listed in TEMPLATE_PLACEHOLDERS; fields without an entry (or
with an empty one) render as blank when the user leaves them out.
"""

from state_law_guidance.constants import DEFAULT_LINE_HEIGHT
from state_law_guidance.models.documents import DocumentTemplateKind as Kind
from state_law_guidance.models.documents import TemplateLayout

SIGNATURE_LINE = "_______________________  Date: __________"


def _layout(
    kind: Kind,
    lines: list[str],
    headings: set[str],
    line_height: int = DEFAULT_LINE_HEIGHT,
    lead_line_height: int | None = None,
) -> TemplateLayout:
    return TemplateLayout(
        kind=kind,
        lines=tuple(lines),
        headings=frozenset(headings),
        line_height=line_height,
        lead_line_height=lead_line_height,
    )


TEMPLATE_LAYOUTS: dict[Kind, TemplateLayout] = {
    Kind.LEASE_AGREEMENT: _layout(
        Kind.LEASE_AGREEMENT,
        [
            "LANDLORD INFORMATION",
            "Name: {landlordName}",
            "Address: {landlordAddress}",
            "Phone: {landlordPhone}",
            "",
            "TENANT INFORMATION",
            "Name: {tenantName}",
            "Address: {tenantAddress}",
            "Phone: {tenantPhone}",
            "",
            "PROPERTY INFORMATION",
            "Address: {propertyAddress}",
            "Type: {propertyType}",
            "Bedrooms: {bedrooms}",
            "Bathrooms: {bathrooms}",
            "",
            "LEASE TERMS",
            "Lease Start Date: {startDate}",
            "Lease End Date: {endDate}",
            "Monthly Rent: ${monthlyRent}",
            "Security Deposit: ${securityDeposit}",
            "Payment Due Date: {paymentDueDate}",
            "",
            "SIGNATURES",
            "",
            "_______________________          Date: __________",
            "Landlord Signature",
            "",
            "_______________________          Date: __________",
            "Tenant Signature",
        ],
        {
            "LANDLORD INFORMATION",
            "TENANT INFORMATION",
            "PROPERTY INFORMATION",
            "LEASE TERMS",
            "SIGNATURES",
        },
    ),
    Kind.RENT_RECEIPT: _layout(
        Kind.RENT_RECEIPT,
        [
            "RECEIPT #{receiptNumber}",
            "Received From: {tenantName}",
            "Property Address: {propertyAddress}",
            "Payment Amount: ${amount}",
            "Payment Period: {period}",
            "Payment Method: {paymentMethod}",
            "Date Received: {dateReceived}",
            "",
            "Received By: _______________________",
            "Signature: _______________________",
            "Date: _______________________",
        ],
        set(),
        line_height=25,
        lead_line_height=30,
    ),
    Kind.MAINTENANCE_REQUEST: _layout(
        Kind.MAINTENANCE_REQUEST,
        [
            "MAINTENANCE REQUEST FORM",
            "",
            "Date: {date}",
            "Tenant Name: {tenantName}",
            "Unit/Address: {unit}",
            "Contact Phone: {phone}",
            "Best Time to Contact: {contactTime}",
            "",
            "ISSUE DETAILS",
            "Location in Unit: {location}",
            "Priority Level: {priority}",
            "",
            "Description of Problem:",
            "{description}",
            "",
            "How long has this been an issue? {duration}",
            "Permission to Enter: {permission}",
            "",
            "Tenant Signature: _______________________",
            "Date: _______________________",
        ],
        {"MAINTENANCE REQUEST FORM", "ISSUE DETAILS"},
    ),
    Kind.NOTICE_TO_VACATE: _layout(
        Kind.NOTICE_TO_VACATE,
        [
            "NOTICE TO VACATE",
            "",
            "Date: {date}",
            "",
            "To: {landlordName}",
            "Property Address: {propertyAddress}",
            "",
            "Dear {landlordName},",
            "",
            "This letter serves as my official notice to vacate the above-referenced property.",
            "",
            "Move-Out Date: {moveOutDate}",
            "Notice Period: {noticePeriod}",
            "",
            "Forwarding Address:",
            "{forwardingAddress}",
            "",
            "Please send my security deposit refund to the forwarding address above.",
            "",
            "I will ensure the property is clean and in good condition upon move-out.",
            "Please contact me to schedule a move-out inspection.",
            "",
            "Sincerely,",
            "",
            "_______________________",
            "{tenantName}",
            "Date: _______________________",
        ],
        {"NOTICE TO VACATE"},
    ),
    Kind.SECURITY_DEPOSIT_CLAIM: _layout(
        Kind.SECURITY_DEPOSIT_CLAIM,
        [
            "SECURITY DEPOSIT CLAIM FORM",
            "",
            "Tenant Information:",
            "Name: {tenantName}",
            "Previous Address: {previousAddress}",
            "Move-Out Date: {moveOutDate}",
            "",
            "Deposit Information:",
            "Original Deposit Amount: ${depositAmount}",
            "Date Deposit Paid: {depositDate}",
            "",
            "Claimed Deductions (if any):",
            "{deductions}",
            "",
            "Dispute Reason:",
            "{disputeReason}",
            "",
            "Amount Claimed: ${amountClaimed}",
            "",
            "Supporting Documentation:",
            "[ ] Move-in inspection report",
            "[ ] Move-out inspection report",
            "[ ] Photos/videos",
            "[ ] Receipts for cleaning/repairs",
            "[ ] Other: {otherDocs}",
            "",
            "Signature: _______________________",
            "Date: _______________________",
        ],
        {"SECURITY DEPOSIT CLAIM FORM"},
    ),
    Kind.RENT_INCREASE_NOTICE: _layout(
        Kind.RENT_INCREASE_NOTICE,
        [
            "NOTICE OF RENT INCREASE",
            "",
            "Date: {date}",
            "",
            "To: {tenantName}",
            "Property Address: {propertyAddress}",
            "",
            "Dear {tenantName},",
            "",
            "This letter serves as official notice of a rent increase for the above property.",
            "",
            "Current Monthly Rent: ${currentRent}",
            "New Monthly Rent: ${newRent}",
            "Increase Amount: ${increaseAmount}",
            "Effective Date: {effectiveDate}",
            "Notice Period: {noticePeriod}",
            "",
            "Reason for Increase:",
            "{reason}",
            "",
            "All other terms and conditions of your lease remain unchanged.",
            "",
            "If you have any questions, please contact us at:",
            "Phone: {landlordPhone}",
            "Email: {landlordEmail}",
            "",
            "Sincerely,",
            "",
            "_______________________",
            "{landlordName}",
            "Date: _______________________",
        ],
        {"NOTICE OF RENT INCREASE"},
    ),
    Kind.ROOMMATE_AGREEMENT: _layout(
        Kind.ROOMMATE_AGREEMENT,
        [
            "ROOMMATE AGREEMENT",
            "",
            "This agreement is made on {date}",
            "",
            "Between the following roommates:",
            "Roommate 1: {roommate1}",
            "Roommate 2: {roommate2}",
            "Roommate 3: {roommate3}",
            "",
            "Property Address: {propertyAddress}",
            "",
            "RENT DIVISION",
            "Total Monthly Rent: ${totalRent}",
            "Roommate 1 Share: ${rent1}",
            "Roommate 2 Share: ${rent2}",
            "Roommate 3 Share: ${rent3}",
            "",
            "UTILITIES & EXPENSES",
            "Utilities Split: {utilitySplit}",
            "Internet/Cable: ${internet}",
            "Utilities: ${utilities}",
            "",
            "HOUSE RULES",
            "Quiet Hours: {quietHours}",
            "Guest Policy: {guestPolicy}",
            "Cleaning Schedule: {cleaning}",
            "",
            "SIGNATURES",
            "",
            SIGNATURE_LINE,
            "Roommate 1",
            "",
            SIGNATURE_LINE,
            "Roommate 2",
        ],
        {"ROOMMATE AGREEMENT", "RENT DIVISION", "UTILITIES & EXPENSES", "HOUSE RULES", "SIGNATURES"},
    ),
    Kind.PET_ADDENDUM: _layout(
        Kind.PET_ADDENDUM,
        [
            "PET ADDENDUM TO LEASE AGREEMENT",
            "",
            "Property Address: {propertyAddress}",
            "Lease Date: {leaseDate}",
            "",
            "TENANT INFORMATION",
            "Tenant Name: {tenantName}",
            "",
            "PET INFORMATION",
            "Pet Type: {petType}",
            "Breed: {breed}",
            "Name: {petName}",
            "Age: {petAge}",
            "Weight: {weight}",
            "Color: {color}",
            "",
            "FEES & DEPOSITS",
            "Pet Deposit: ${petDeposit} (Refundable/Non-refundable)",
            "Monthly Pet Rent: ${petRent}",
            "",
            "PET RULES",
            "- Pet must be vaccinated and licensed per local ordinances",
            "- Tenant responsible for all damage caused by pet",
            "- Pet waste must be cleaned immediately",
            "- Pet must not cause disturbance to neighbors",
            "- Additional pets require written approval",
            "",
            "Proof of vaccinations attached: [ ] Yes  [ ] No",
            "Pet license attached: [ ] Yes  [ ] No",
            "",
            "SIGNATURES",
            "",
            SIGNATURE_LINE,
            "Landlord/Property Manager",
            "",
            SIGNATURE_LINE,
            "Tenant",
        ],
        {
            "PET ADDENDUM TO LEASE AGREEMENT",
            "TENANT INFORMATION",
            "PET INFORMATION",
            "FEES & DEPOSITS",
            "PET RULES",
            "SIGNATURES",
        },
    ),
    Kind.SUBLEASE_AGREEMENT: _layout(
        Kind.SUBLEASE_AGREEMENT,
        [
            "SUBLEASE AGREEMENT",
            "",
            "Original Lease Date: {originalLeaseDate}",
            "Sublease Start Date: {startDate}",
            "Sublease End Date: {endDate}",
            "",
            "ORIGINAL TENANT (Sublessor)",
            "Name: {originalTenant}",
            "Phone: {originalPhone}",
            "",
            "SUBTENANT (Sublessee)",
            "Name: {subtenant}",
            "Phone: {subtenantPhone}",
            "Email: {subtenantEmail}",
            "",
            "PROPERTY",
            "Address: {propertyAddress}",
            "Unit: {unit}",
            "",
            "FINANCIAL TERMS",
            "Monthly Sublease Rent: ${rent}",
            "Security Deposit: ${deposit}",
            "Payment Due Date: {dueDate}",
            "",
            "LANDLORD APPROVAL",
            "Landlord Name: {landlordName}",
            "Approval Date: {approvalDate}",
            "",
            "TERMS",
            "- Subtenant agrees to abide by all terms of the original lease",
            "- Original tenant remains responsible to landlord",
            "- Utilities: {utilities}",
            "",
            "SIGNATURES",
            "",
            SIGNATURE_LINE,
            "Original Tenant (Sublessor)",
            "",
            SIGNATURE_LINE,
            "Subtenant (Sublessee)",
            "",
            SIGNATURE_LINE,
            "Landlord (Approval)",
        ],
        {
            "SUBLEASE AGREEMENT",
            "ORIGINAL TENANT (Sublessor)",
            "SUBTENANT (Sublessee)",
            "PROPERTY",
            "FINANCIAL TERMS",
            "LANDLORD APPROVAL",
            "TERMS",
            "SIGNATURES",
        },
    ),
    Kind.MOVE_IN_CHECKLIST: _layout(
        Kind.MOVE_IN_CHECKLIST,
        [
            "MOVE-IN INSPECTION CHECKLIST",
            "",
            "Property Address: {propertyAddress}",
            "Move-In Date: {moveInDate}",
            "Tenant: {tenantName}",
            "",
            "Rate each item: E=Excellent, G=Good, F=Fair, P=Poor, N/A=Not Applicable",
            "",
            "LIVING ROOM",
            "[ ] Walls/Paint ____  Notes: _________________",
            "[ ] Carpet/Flooring ____  Notes: _________________",
            "[ ] Windows/Screens ____  Notes: _________________",
            "[ ] Light Fixtures ____  Notes: _________________",
            "[ ] Outlets/Switches ____  Notes: _________________",
            "",
            "KITCHEN",
            "[ ] Cabinets ____  Notes: _________________",
            "[ ] Countertops ____  Notes: _________________",
            "[ ] Appliances ____  Notes: _________________",
            "[ ] Sink/Faucet ____  Notes: _________________",
            "[ ] Flooring ____  Notes: _________________",
            "",
            "BATHROOM(S)",
            "[ ] Toilet ____  Notes: _________________",
            "[ ] Shower/Tub ____  Notes: _________________",
            "[ ] Sink/Vanity ____  Notes: _________________",
            "[ ] Tile/Flooring ____  Notes: _________________",
            "[ ] Ventilation Fan ____  Notes: _________________",
            "",
            "BEDROOM(S)",
            "[ ] Walls/Paint ____  Notes: _________________",
            "[ ] Closets ____  Notes: _________________",
            "[ ] Windows ____  Notes: _________________",
            "[ ] Flooring ____  Notes: _________________",
            "",
            "ADDITIONAL NOTES:",
            "{notes}",
            "",
            "Photos taken: [ ] Yes  [ ] No",
            "",
            "SIGNATURES",
            "",
            SIGNATURE_LINE,
            "Tenant",
            "",
            SIGNATURE_LINE,
            "Landlord/Property Manager",
        ],
        {
            "MOVE-IN INSPECTION CHECKLIST",
            "LIVING ROOM",
            "KITCHEN",
            "BATHROOM(S)",
            "BEDROOM(S)",
            "ADDITIONAL NOTES:",
            "SIGNATURES",
        },
        line_height=18,
    ),
    Kind.EMPLOYMENT_VERIFICATION: _layout(
        Kind.EMPLOYMENT_VERIFICATION,
        [
            "EMPLOYMENT VERIFICATION LETTER",
            "",
            "Date: {date}",
            "",
            "To Whom It May Concern:",
            "",
            "This letter confirms that {employeeName} is currently employed with our company.",
            "",
            "EMPLOYEE INFORMATION",
            "Employee Name: {employeeName}",
            "Position: {position}",
            "Department: {department}",
            "Employee ID: {employeeId}",
            "",
            "EMPLOYMENT DETAILS",
            "Employment Start Date: {startDate}",
            "Employment Status: {employmentStatus}",
            "Work Schedule: {schedule}",
            "",
            "COMPANY INFORMATION",
            "Company Name: {companyName}",
            "Company Address: {companyAddress}",
            "HR Contact: {hrContact}",
            "Phone: {phone}",
            "Email: {email}",
            "",
            "If you require additional information, please contact our Human Resources department.",
            "",
            "Sincerely,",
            "",
            "_______________________",
            "{signerName}",
            "{signerTitle}",
            "",
            "Company Stamp/Seal: _______________",
        ],
        {
            "EMPLOYMENT VERIFICATION LETTER",
            "EMPLOYEE INFORMATION",
            "EMPLOYMENT DETAILS",
            "COMPANY INFORMATION",
        },
    ),
    Kind.INCOME_VERIFICATION: _layout(
        Kind.INCOME_VERIFICATION,
        [
            "INCOME VERIFICATION LETTER",
            "",
            "Date: {date}",
            "",
            "To Whom It May Concern:",
            "",
            "This letter verifies the income of {employeeName}.",
            "",
            "EMPLOYEE INFORMATION",
            "Name: {employeeName}",
            "Position: {position}",
            "Employment Status: {status}",
            "Hire Date: {hireDate}",
            "",
            "INCOME DETAILS",
            "Annual Gross Salary: ${annualSalary}",
            "Pay Frequency: {payFrequency}",
            "Gross Pay per Period: ${payPerPeriod}",
            "",
            "ADDITIONAL COMPENSATION (if applicable)",
            "Bonuses: ${bonuses}",
            "Commission: ${commission}",
            "Overtime: ${overtime}",
            "Other Income: ${otherIncome}",
            "",
            "Total Annual Income: ${totalIncome}",
            "",
            "This information is current as of {currentDate}.",
            "",
            "For verification purposes, please contact:",
            "HR Department: {hrContact}",
            "Phone: {phone}",
            "Email: {email}",
            "",
            "Sincerely,",
            "",
            "_______________________",
            "{signerName}",
            "{signerTitle}",
            "{companyName}",
        ],
        {
            "INCOME VERIFICATION LETTER",
            "EMPLOYEE INFORMATION",
            "INCOME DETAILS",
            "ADDITIONAL COMPENSATION (if applicable)",
        },
    ),
    Kind.W4_FORM: _layout(
        Kind.W4_FORM,
        [
            "Form W-4 Worksheet",
            "Employee's Withholding Certificate",
            "",
            "Note: This is a simplified worksheet. For official IRS Form W-4, visit www.irs.gov",
            "",
            "EMPLOYEE INFORMATION",
            "First Name: {firstName}  Last Name: {lastName}",
            "Social Security Number: {ssn}",
            "Address: {address}",
            "City: {city}  State: {state}  ZIP: {zip}",
            "",
            "FILING STATUS",
            "[ ] Single or Married filing separately",
            "[ ] Married filing jointly or Qualifying surviving spouse",
            "[ ] Head of household",
            "",
            "MULTIPLE JOBS OR SPOUSE WORKS",
            "Complete if you have more than one job or are married filing jointly and spouse works.",
            "Check here: [ ]  (Use IRS worksheet or calculator)",
            "",
            "CLAIM DEPENDENTS",
            "Number of qualifying children: {children}",
            "Number of other dependents: {otherDependents}",
            "",
            "OTHER ADJUSTMENTS",
            "Other income (not from jobs): ${otherIncome}",
            "Deductions: ${deductions}",
            "Extra withholding per pay period: ${extraWithholding}",
            "",
            "Under penalties of perjury, I declare that this certificate is true, correct, and complete.",
            "",
            "Employee Signature: _______________________  Date: __________",
            "",
            "EMPLOYER USE ONLY",
            "Employer Name: {employerName}",
            "Employer ID (EIN): {ein}",
        ],
        {
            "Form W-4 Worksheet",
            "EMPLOYEE INFORMATION",
            "FILING STATUS",
            "MULTIPLE JOBS OR SPOUSE WORKS",
            "CLAIM DEPENDENTS",
            "OTHER ADJUSTMENTS",
            "EMPLOYER USE ONLY",
        },
        line_height=18,
    ),
    Kind.RENTAL_INCOME_REPORT: _layout(
        Kind.RENTAL_INCOME_REPORT,
        [
            "RENTAL INCOME REPORT",
            "",
            "Tax Year: {taxYear}",
            "Report Date: {reportDate}",
            "",
            "PROPERTY OWNER INFORMATION",
            "Owner Name: {ownerName}",
            "SSN/EIN: {taxId}",
            "Address: {ownerAddress}",
            "",
            "RENTAL PROPERTY",
            "Property Address: {propertyAddress}",
            "Property Type: {propertyType}",
            "Number of Units: {units}",
            "",
            "RENTAL INCOME",
            "Total Rent Collected: ${totalRent}",
            "Security Deposits Retained: ${depositsRetained}",
            "Other Income: ${otherIncome}",
            "TOTAL INCOME: ${totalIncome}",
            "",
            "RENTAL EXPENSES",
            "Mortgage Interest: ${mortgageInterest}",
            "Property Tax: ${propertyTax}",
            "Insurance: ${insurance}",
            "Repairs & Maintenance: ${repairs}",
            "Utilities: ${utilities}",
            "Management Fees: ${managementFees}",
            "HOA Fees: ${hoaFees}",
            "Other Expenses: ${otherExpenses}",
            "TOTAL EXPENSES: ${totalExpenses}",
            "",
            "DEPRECIATION",
            "Building Depreciation: ${depreciation}",
            "",
            "NET RENTAL INCOME/LOSS: ${netIncome}",
            "",
            "This report is for tax preparation purposes. Consult a tax professional.",
            "",
            "Prepared by: _______________________  Date: __________",
        ],
        {
            "RENTAL INCOME REPORT",
            "PROPERTY OWNER INFORMATION",
            "RENTAL PROPERTY",
            "RENTAL INCOME",
            "RENTAL EXPENSES",
            "DEPRECIATION",
        },
        line_height=18,
    ),
    Kind.PROPERTY_TAX_ESTIMATE: _layout(
        Kind.PROPERTY_TAX_ESTIMATE,
        [
            "PROPERTY TAX ESTIMATE",
            "",
            "Estimate Date: {date}",
            "Tax Year: {taxYear}",
            "",
            "PROPERTY INFORMATION",
            "Property Address: {propertyAddress}",
            "Parcel Number: {parcelNumber}",
            "County: {county}",
            "",
            "ASSESSMENT",
            "Assessed Property Value: ${assessedValue}",
            "Market Value: ${marketValue}",
            "Assessment Ratio: {assessmentRatio}",
            "",
            "TAX RATES (per $1,000 of assessed value)",
            "County Tax Rate: {countyRate}",
            "City Tax Rate: {cityRate}",
            "School District Rate: {schoolRate}",
            "Special Assessments: {specialRate}",
            "Total Combined Rate: {totalRate}",
            "",
            "ESTIMATED TAX BREAKDOWN",
            "County Tax: ${countyTax}",
            "City Tax: ${cityTax}",
            "School District Tax: ${schoolTax}",
            "Special Assessments: ${specialTax}",
            "",
            "TOTAL ESTIMATED ANNUAL TAX: ${totalTax}",
            "",
            "Estimated Monthly Escrow: ${monthlyEscrow}",
            "",
            "PAYMENT SCHEDULE",
            "Due Date 1: {dueDate1}  Amount: ${payment1}",
            "Due Date 2: {dueDate2}  Amount: ${payment2}",
            "",
            "Note: This is an estimate only. Actual tax amounts may vary.",
            "Contact your local tax assessor's office for official tax bills.",
            "",
            "Prepared by: _______________________  Date: __________",
        ],
        {
            "PROPERTY TAX ESTIMATE",
            "PROPERTY INFORMATION",
            "ASSESSMENT",
            "TAX RATES (per $1,000 of assessed value)",
            "ESTIMATED TAX BREAKDOWN",
            "PAYMENT SCHEDULE",
        },
        line_height=18,
    ),
    Kind.POWER_OF_ATTORNEY: _layout(
        Kind.POWER_OF_ATTORNEY,
        [
            "POWER OF ATTORNEY",
            "",
            "PRINCIPAL (Person Granting Power)",
            "Name: {principalName}",
            "Address: {principalAddress}",
            "Date of Birth: {principalDOB}",
            "",
            "ATTORNEY-IN-FACT (Person Receiving Power)",
            "Name: {agentName}",
            "Address: {agentAddress}",
            "Phone: {agentPhone}",
            "",
            "GRANT OF AUTHORITY",
            "I, the Principal, grant the Attorney-in-Fact the authority to act on my behalf regarding:",
            "",
            "Powers Granted (check all that apply):",
            "[ ] Real estate transactions",
            "[ ] Banking and financial matters",
            "[ ] Legal proceedings",
            "[ ] Healthcare decisions",
            "[ ] Tax matters",
            "[ ] Insurance matters",
            "[ ] Other: {otherPowers}",
            "",
            "EFFECTIVE DATE",
            "This Power of Attorney:",
            "[ ] Becomes effective immediately",
            "[ ] Becomes effective on: {effectiveDate}",
            "[ ] Becomes effective upon my incapacity",
            "",
            "TERMINATION",
            "This Power of Attorney:",
            "[ ] Continues indefinitely until revoked",
            "[ ] Terminates on: {terminationDate}",
            "[ ] Is durable (survives incapacity)",
            "",
            "LIMITATIONS",
            "Special instructions or limitations: {limitations}",
            "",
            "WARNING: This is a general form. Consult an attorney for specific legal advice.",
            "",
            "PRINCIPAL'S SIGNATURE",
            SIGNATURE_LINE,
            "{principalName}",
            "",
            "WITNESS 1",
            SIGNATURE_LINE,
            "Name: _______________________",
            "",
            "WITNESS 2",
            SIGNATURE_LINE,
            "Name: _______________________",
            "",
            "NOTARY PUBLIC",
            "Subscribed and sworn before me on __________",
            "_______________________",
            "Notary Public Signature",
            "My commission expires: __________",
        ],
        {
            "POWER OF ATTORNEY",
            "PRINCIPAL (Person Granting Power)",
            "ATTORNEY-IN-FACT (Person Receiving Power)",
            "GRANT OF AUTHORITY",
            "EFFECTIVE DATE",
            "TERMINATION",
            "LIMITATIONS",
            "PRINCIPAL'S SIGNATURE",
            "WITNESS 1",
            "WITNESS 2",
            "NOTARY PUBLIC",
        },
        line_height=18,
    ),
    Kind.LEASE_TERMINATION: _layout(
        Kind.LEASE_TERMINATION,
        [
            "MUTUAL LEASE TERMINATION AGREEMENT",
            "",
            "Date: {date}",
            "",
            "PARTIES",
            "Landlord: {landlordName}",
            "Tenant: {tenantName}",
            "",
            "PROPERTY",
            "Address: {propertyAddress}",
            "",
            "ORIGINAL LEASE",
            "Lease Start Date: {leaseStartDate}",
            "Original Lease End Date: {leaseEndDate}",
            "",
            "TERMINATION TERMS",
            "Termination Date: {terminationDate}",
            "Reason for Early Termination: {reason}",
            "",
            "FINANCIAL SETTLEMENT",
            "Security Deposit Held: ${depositHeld}",
            "Amount to be Returned: ${depositReturn}",
            "Deductions (if any): ${deductions}",
            "Early Termination Fee: ${terminationFee}",
            "Outstanding Rent: ${outstandingRent}",
            "",
            "MOVE-OUT CONDITIONS",
            "Move-Out Date: {moveOutDate}",
            "Move-Out Inspection Date: {inspectionDate}",
            "",
            "Tenant agrees to:",
            "- Return property in clean condition",
            "- Remove all personal belongings",
            "- Return all keys and access devices",
            "- Pay all utilities through move-out date",
            "",
            "MUTUAL RELEASE",
            "Both parties agree this terminates all obligations under the original lease.",
            "Neither party shall have further claims against the other except as stated herein.",
            "",
            "SIGNATURES",
            "",
            SIGNATURE_LINE,
            "Landlord Signature",
            "{landlordName}",
            "",
            SIGNATURE_LINE,
            "Tenant Signature",
            "{tenantName}",
        ],
        {
            "MUTUAL LEASE TERMINATION AGREEMENT",
            "PARTIES",
            "PROPERTY",
            "ORIGINAL LEASE",
            "TERMINATION TERMS",
            "FINANCIAL SETTLEMENT",
            "MOVE-OUT CONDITIONS",
            "MUTUAL RELEASE",
            "SIGNATURES",
        },
        line_height=18,
    ),
    Kind.REPAIR_REQUEST: _layout(
        Kind.REPAIR_REQUEST,
        [
            "REPAIR REQUEST FORM",
            "",
            "Request Date: {date}",
            "Request Number: #{requestNumber}",
            "",
            "TENANT INFORMATION",
            "Name: {tenantName}",
            "Property Address: {propertyAddress}",
            "Unit: {unit}",
            "Phone: {phone}",
            "Email: {email}",
            "Best Contact Time: {contactTime}",
            "",
            "REPAIR DETAILS",
            "Area/Room: {area}",
            "Item Needing Repair: {item}",
            "",
            "Problem Description:",
            "{description}",
            "",
            "URGENCY LEVEL",
            "[ ] Emergency (Safety hazard, no heat/water, severe leak)",
            "[ ] Urgent (Major inconvenience, requires prompt attention)",
            "[ ] Normal (Standard repair, can wait a few days)",
            "[ ] Low Priority (Cosmetic or minor issue)",
            "",
            "ADDITIONAL INFORMATION",
            "When did problem start? {problemStart}",
            "Has problem worsened? {worsened}",
            "Previous repairs to this item? {previousRepairs}",
            "",
            "ACCESS PERMISSION",
            "[ ] Permission granted to enter unit for repairs",
            "[ ] Tenant will be present during repair",
            "[ ] Contact tenant first to schedule: Phone _____________",
            "",
            "LANDLORD/PROPERTY MANAGER USE",
            "Date Received: _____________",
            "Assigned to: _____________",
            "Scheduled Date: _____________",
            "Completed Date: _____________",
            "Cost: $ _____________",
            "",
            "Notes: _______________________________________",
            "",
            "Tenant Signature: _______________________  Date: __________",
        ],
        {
            "REPAIR REQUEST FORM",
            "TENANT INFORMATION",
            "REPAIR DETAILS",
            "URGENCY LEVEL",
            "ADDITIONAL INFORMATION",
            "ACCESS PERMISSION",
            "LANDLORD/PROPERTY MANAGER USE",
        },
        line_height=18,
    ),
}


TEMPLATE_PLACEHOLDERS: dict[Kind, dict[str, str]] = {
    Kind.LEASE_AGREEMENT: {
        "landlordName": "[Landlord Name]",
        "landlordAddress": "[Landlord Address]",
        "landlordPhone": "[Phone Number]",
        "tenantName": "[Tenant Name]",
        "tenantAddress": "[Current Address]",
        "tenantPhone": "[Phone Number]",
        "propertyAddress": "[Property Address]",
        "propertyType": "[Apartment/House]",
        "bedrooms": "[Number]",
        "bathrooms": "[Number]",
        "startDate": "[Start Date]",
        "endDate": "[End Date]",
        "monthlyRent": "[Amount]",
        "securityDeposit": "[Amount]",
        "paymentDueDate": "[Day of Month]",
    },
    Kind.RENT_RECEIPT: {
        "receiptNumber": "[Receipt Number]",
        "tenantName": "[Tenant Name]",
        "propertyAddress": "[Property Address]",
        "amount": "[Amount]",
        "period": "[Month/Year]",
        "paymentMethod": "[Cash/Check/Electronic]",
        "dateReceived": "[Date]",
    },
    Kind.MAINTENANCE_REQUEST: {
        "date": "[Date]",
        "tenantName": "[Your Name]",
        "unit": "[Unit Number/Address]",
        "phone": "[Phone Number]",
        "contactTime": "[Morning/Afternoon/Evening]",
        "location": "[Kitchen/Bathroom/Bedroom/etc.]",
        "priority": "[Emergency/High/Normal/Low]",
        "description": "[Detailed description of the maintenance issue]",
        "duration": "[Duration]",
        "permission": "[Yes/No]",
    },
    Kind.NOTICE_TO_VACATE: {
        "date": "[Date]",
        "landlordName": "[Landlord/Property Manager Name]",
        "propertyAddress": "[Property Address]",
        "moveOutDate": "[Date]",
        "noticePeriod": "[30/60 days]",
        "forwardingAddress": "[New Address]",
        "tenantName": "[Tenant Name]",
    },
    Kind.SECURITY_DEPOSIT_CLAIM: {
        "tenantName": "[Name]",
        "previousAddress": "[Previous Address]",
        "moveOutDate": "[Date]",
        "depositAmount": "[Amount]",
        "depositDate": "[Date]",
        "deductions": "[List any deductions claimed by landlord]",
        "disputeReason": "[Explain why you dispute the deductions]",
        "amountClaimed": "[Amount]",
        "otherDocs": "",
    },
    Kind.RENT_INCREASE_NOTICE: {
        "date": "[Date]",
        "tenantName": "[Tenant Name]",
        "propertyAddress": "[Property Address]",
        "currentRent": "[Current Amount]",
        "newRent": "[New Amount]",
        "increaseAmount": "[Difference]",
        "effectiveDate": "[Date]",
        "noticePeriod": "[30/60 days]",
        "reason": "[Reason for rent increase]",
        "landlordPhone": "[Phone]",
        "landlordEmail": "[Email]",
        "landlordName": "[Landlord/Property Manager Name]",
    },
    Kind.ROOMMATE_AGREEMENT: {
        "date": "[Date]",
        "roommate1": "[Name]",
        "roommate2": "[Name]",
        "roommate3": "",
        "propertyAddress": "[Address]",
        "totalRent": "[Amount]",
        "rent1": "[Amount]",
        "rent2": "[Amount]",
        "rent3": "",
        "utilitySplit": "[Equal/Percentage]",
        "internet": "[Amount]",
        "utilities": "[Amount]",
        "quietHours": "[Time]",
        "guestPolicy": "[Policy]",
        "cleaning": "[Schedule]",
    },
    Kind.PET_ADDENDUM: {
        "propertyAddress": "[Address]",
        "leaseDate": "[Date]",
        "tenantName": "[Name]",
        "petType": "[Dog/Cat/Other]",
        "breed": "[Breed]",
        "petName": "[Pet Name]",
        "petAge": "[Age]",
        "weight": "[Weight]",
        "color": "[Color]",
        "petDeposit": "[Amount]",
        "petRent": "[Amount]",
    },
    Kind.SUBLEASE_AGREEMENT: {
        "originalLeaseDate": "[Date]",
        "startDate": "[Date]",
        "endDate": "[Date]",
        "originalTenant": "[Name]",
        "originalPhone": "[Phone]",
        "subtenant": "[Name]",
        "subtenantPhone": "[Phone]",
        "subtenantEmail": "[Email]",
        "propertyAddress": "[Address]",
        "unit": "[Unit #]",
        "rent": "[Amount]",
        "deposit": "[Amount]",
        "dueDate": "[Day of Month]",
        "landlordName": "[Name]",
        "approvalDate": "[Date]",
        "utilities": "[Who pays]",
    },
    Kind.MOVE_IN_CHECKLIST: {
        "propertyAddress": "[Address]",
        "moveInDate": "[Date]",
        "tenantName": "[Name]",
        "notes": "[Additional observations]",
    },
    Kind.EMPLOYMENT_VERIFICATION: {
        "date": "[Date]",
        "employeeName": "[Employee Name]",
        "position": "[Job Title]",
        "department": "[Department]",
        "employeeId": "[ID Number]",
        "startDate": "[Date]",
        "employmentStatus": "[Full-time/Part-time]",
        "schedule": "[Hours per week]",
        "companyName": "[Company Name]",
        "companyAddress": "[Address]",
        "hrContact": "[Name]",
        "phone": "[Phone]",
        "email": "[Email]",
        "signerName": "[HR Manager Name]",
        "signerTitle": "[Title]",
    },
    Kind.INCOME_VERIFICATION: {
        "date": "[Date]",
        "employeeName": "[Employee Name]",
        "position": "[Job Title]",
        "status": "[Full-time/Part-time]",
        "hireDate": "[Date]",
        "annualSalary": "[Amount]",
        "payFrequency": "[Weekly/Bi-weekly/Monthly]",
        "payPerPeriod": "[Amount]",
        "bonuses": "[Amount]",
        "commission": "[Amount]",
        "overtime": "[Amount]",
        "otherIncome": "[Amount]",
        "totalIncome": "[Total Amount]",
        "currentDate": "[Date]",
        "hrContact": "[Name]",
        "phone": "[Phone]",
        "email": "[Email]",
        "signerName": "[HR Manager/Supervisor]",
        "signerTitle": "[Title]",
        "companyName": "[Company Name]",
    },
    Kind.W4_FORM: {
        "firstName": "[First]",
        "lastName": "[Last]",
        "ssn": "[XXX-XX-XXXX]",
        "address": "[Address]",
        "city": "[City]",
        "state": "[State]",
        "zip": "[ZIP]",
        "children": "[Number]",
        "otherDependents": "[Number]",
        "otherIncome": "[Amount]",
        "deductions": "[Amount]",
        "extraWithholding": "[Amount]",
        "employerName": "[Company Name]",
        "ein": "[XX-XXXXXXX]",
    },
    Kind.RENTAL_INCOME_REPORT: {
        "taxYear": "[Year]",
        "reportDate": "[Date]",
        "ownerName": "[Name]",
        "taxId": "[XXX-XX-XXXX]",
        "ownerAddress": "[Address]",
        "propertyAddress": "[Address]",
        "propertyType": "[Single-family/Multi-unit]",
        "units": "[Number]",
        "totalRent": "[Amount]",
        "depositsRetained": "[Amount]",
        "otherIncome": "[Amount]",
        "totalIncome": "[Total]",
        "mortgageInterest": "[Amount]",
        "propertyTax": "[Amount]",
        "insurance": "[Amount]",
        "repairs": "[Amount]",
        "utilities": "[Amount]",
        "managementFees": "[Amount]",
        "hoaFees": "[Amount]",
        "otherExpenses": "[Amount]",
        "totalExpenses": "[Total]",
        "depreciation": "[Amount]",
        "netIncome": "[Amount]",
    },
    Kind.PROPERTY_TAX_ESTIMATE: {
        "date": "[Date]",
        "taxYear": "[Year]",
        "propertyAddress": "[Address]",
        "parcelNumber": "[Parcel ID]",
        "county": "[County]",
        "assessedValue": "[Amount]",
        "marketValue": "[Amount]",
        "assessmentRatio": "[Percentage]",
        "countyRate": "[Rate]",
        "cityRate": "[Rate]",
        "schoolRate": "[Rate]",
        "specialRate": "[Rate]",
        "totalRate": "[Rate]",
        "countyTax": "[Amount]",
        "cityTax": "[Amount]",
        "schoolTax": "[Amount]",
        "specialTax": "[Amount]",
        "totalTax": "[Total]",
        "monthlyEscrow": "[Amount]",
        "dueDate1": "[Date]",
        "payment1": "[Amount]",
        "dueDate2": "[Date]",
        "payment2": "[Amount]",
    },
    Kind.POWER_OF_ATTORNEY: {
        "principalName": "[Your Full Name]",
        "principalAddress": "[Address]",
        "principalDOB": "[Date]",
        "agentName": "[Agent Full Name]",
        "agentAddress": "[Address]",
        "agentPhone": "[Phone]",
        "otherPowers": "",
        "effectiveDate": "[Date]",
        "terminationDate": "[Date]",
        "limitations": "[Any restrictions]",
    },
    Kind.LEASE_TERMINATION: {
        "date": "[Date]",
        "landlordName": "[Landlord Name]",
        "tenantName": "[Tenant Name]",
        "propertyAddress": "[Property Address]",
        "leaseStartDate": "[Date]",
        "leaseEndDate": "[Date]",
        "terminationDate": "[Date]",
        "reason": "[Reason]",
        "depositHeld": "[Amount]",
        "depositReturn": "[Amount]",
        "deductions": "[Amount]",
        "terminationFee": "[Amount]",
        "outstandingRent": "[Amount]",
        "moveOutDate": "[Date]",
        "inspectionDate": "[Date]",
    },
    Kind.REPAIR_REQUEST: {
        "date": "[Date]",
        "requestNumber": "[Request Number]",
        "tenantName": "[Tenant Name]",
        "propertyAddress": "[Address]",
        "unit": "[Unit #]",
        "phone": "[Phone]",
        "email": "[Email]",
        "contactTime": "[Morning/Afternoon/Evening]",
        "area": "[Kitchen/Bathroom/Bedroom/Living Room/Other]",
        "item": "[Appliance/Plumbing/Electrical/HVAC/Other]",
        "description": "[Detailed description of the problem]",
        "problemStart": "[Date/Time]",
        "worsened": "[Yes/No]",
        "previousRepairs": "[Yes/No]",
    },
}
