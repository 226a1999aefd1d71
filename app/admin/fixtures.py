"""Static demo payloads served by the admin read endpoints.

These are not backed by the key-value store.
"""

from typing import Any, Dict, List

DEMO_STATS: Dict[str, int] = {
    "totalUsers": 1250,
    "totalCompanies": 89,
    "totalEmployees": 1161,
    "pendingJobs": 23,
    "activeJobs": 45,
    "totalApplications": 387,
}

DEMO_JOBS: List[Dict[str, Any]] = [
    {
        "id": "demo-job-1",
        "companyId": "demo-company-1",
        "companyName": "TechCorp A.Ş.",
        "title": "Mağaza Temizlik Personeli",
        "workingHours": "09:00-17:00",
        "jobDate": "2024-01-20",
        "description": "Mağaza içi temizlik ve düzenleme işleri",
        "salary": 500,
        "isUrgent": True,
        "status": "pending",
        "createdAt": "2024-01-15T10:00:00Z",
        "applications": [],
    },
    {
        "id": "demo-job-2",
        "companyId": "demo-company-2",
        "companyName": "BuildCorp Ltd.",
        "title": "İnşaat İşçisi",
        "workingHours": "08:00-18:00",
        "jobDate": "2024-01-22",
        "description": "Bina inşaat işleri",
        "salary": 800,
        "isUrgent": False,
        "status": "active",
        "createdAt": "2024-01-16T14:30:00Z",
        "applications": [],
    },
]

DEMO_USERS: List[Dict[str, Any]] = [
    {
        "id": "demo-user-1",
        "email": "ahmet@email.com",
        "fullName": "Ahmet Yılmaz",
        "role": "employee",
        "profileCompleted": True,
        "isActive": True,
        "createdAt": "2024-01-01T00:00:00Z",
    },
    {
        "id": "demo-user-2",
        "email": "techcorp@email.com",
        "fullName": "TechCorp A.Ş.",
        "role": "company",
        "profileCompleted": True,
        "isActive": True,
        "createdAt": "2024-01-05T00:00:00Z",
    },
]

DEMO_URGENT_REQUESTS: List[Dict[str, Any]] = [
    {
        "id": "urgent-1",
        "companyId": "demo-company-1",
        "companyName": "TechCorp A.Ş.",
        "title": "Acil Temizlik Personeli",
        "workingHours": "09:00-17:00",
        "jobDate": "2024-01-20",
        "description": "Acil temizlik ihtiyacı",
        "salary": 500,
        "isUrgent": True,
        "status": "pending",
        "createdAt": "2024-01-15T10:00:00Z",
        "applications": [],
    },
]


def demo_reviewed_job(job_id: str, status: str, stamp_field: str, stamp: str) -> Dict[str, Any]:
    """First demo job re-labelled with ``job_id`` after an admin decision."""
    job = dict(DEMO_JOBS[0])
    job.update({"id": job_id, "status": status, stamp_field: stamp})
    job["applications"] = []
    return job
